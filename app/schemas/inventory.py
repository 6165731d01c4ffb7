from datetime import datetime

from pydantic import Field

from app.models.inventory_log import LogAction
from app.schemas.common import CamelModel


class StockUpdate(CamelModel):
    stock: int = Field(ge=0)
    reason: str | None = None


class StockUpdateOut(CamelModel):
    product_id: str
    previous_stock: int
    updated_stock: int
    updated_at: datetime


class InventoryLogOut(CamelModel):
    id: str
    product_id: str
    warehouse_id: str | None = None
    user_id: str
    action: LogAction
    previous_stock: int
    new_stock: int
    quantity: int
    reason: str
    timestamp: datetime


class InventoryStatusOut(CamelModel):
    product_id: str
    product_name: str
    sku: str
    category: str
    current_stock: int
    min_stock: int
    warehouse: str
    last_updated: datetime | None = None


class InventorySummaryOut(CamelModel):
    total_products: int
    total_stock_value: float
    low_stock_products: int
    out_of_stock_products: int
    recent_movements: list[InventoryLogOut]
    category_breakdown: dict[str, int]
