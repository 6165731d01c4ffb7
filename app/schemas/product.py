from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class ProductCreate(CamelModel):
    name: str = Field(min_length=1)
    sku: str = Field(min_length=1)
    price: float = Field(ge=0)
    category: str = Field(min_length=1)
    stock: int = Field(ge=0)
    min_stock: int = Field(default=0, ge=0)
    description: str = ""
    warehouse_id: str | None = None


class ProductUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    sku: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    category: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    min_stock: int | None = Field(default=None, ge=0)
    description: str | None = None
    warehouse_id: str | None = None


class ProductOut(CamelModel):
    id: str
    name: str
    sku: str
    price: float
    category: str
    stock: int
    min_stock: int
    description: str
    warehouse_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
