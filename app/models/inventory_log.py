from dataclasses import dataclass
from datetime import datetime
from enum import Enum as PyEnum


class LogAction(str, PyEnum):
    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


@dataclass(frozen=True)
class InventoryLog:
    """Tracks every stock change for audit trail. Never modified once written."""

    id: str
    product_id: str
    user_id: str
    action: LogAction
    previous_stock: int
    new_stock: int
    quantity: int  # new_stock - previous_stock
    reason: str
    timestamp: datetime
    warehouse_id: str | None = None
