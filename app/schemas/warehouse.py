from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class WarehouseCreate(CamelModel):
    name: str = Field(min_length=1)
    location: str = ""
    capacity: int = Field(default=0, ge=0)
    is_active: bool = True


class WarehouseUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    location: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class WarehouseOut(CamelModel):
    id: str
    name: str
    location: str
    capacity: int
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
