from dataclasses import dataclass
from datetime import datetime


@dataclass
class Product:
    id: str
    sku: str
    name: str
    price: float
    category: str
    stock: int = 0
    min_stock: int = 0
    description: str = ""
    warehouse_id: str | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    @property
    def stock_value(self) -> float:
        return self.stock * self.price
