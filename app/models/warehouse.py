from dataclasses import dataclass
from datetime import datetime


@dataclass
class Warehouse:
    id: str
    name: str
    location: str = ""
    capacity: int = 0
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
