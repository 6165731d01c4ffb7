from dataclasses import dataclass
from datetime import datetime
from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    ADMIN = "admin"
    MANAGER = "manager"
    VIEWER = "viewer"


@dataclass
class User:
    id: str
    email: str
    name: str
    password_hash: str
    role: UserRole = UserRole.VIEWER
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
