from datetime import datetime

from app.schemas.common import CamelModel


class LowStockReportRow(CamelModel):
    product: str
    sku: str
    stock: int
    warehouse: str
    min_stock: int


class InventoryReportRow(CamelModel):
    product_id: str
    product_name: str
    sku: str
    category: str
    current_stock: int
    min_stock: int
    warehouse: str
    last_updated: datetime | None = None


class MovementReportRow(CamelModel):
    date: datetime
    product: str
    sku: str
    action: str
    quantity: int
    previous_stock: int
    new_stock: int
    warehouse: str
    reason: str
