from fastapi import APIRouter, Depends, Query

from app.api.auth import require_manager, require_viewer
from app.limits import api_limit
from app.models.user import User
from app.schemas.common import ApiResponse, PaginatedResponse, paginate
from app.schemas.inventory import (
    InventoryLogOut,
    InventoryStatusOut,
    InventorySummaryOut,
    StockUpdate,
    StockUpdateOut,
)
from app.services import inventory_service
from app.services.inventory_service import StockMutator
from app.store import InventoryStore, get_store

router = APIRouter(prefix="/inventory", tags=["Inventory"], dependencies=[Depends(api_limit)])


def get_stock_mutator(store: InventoryStore = Depends(get_store)) -> StockMutator:
    return StockMutator(store)


@router.get("", response_model=ApiResponse[list[InventoryStatusOut]])
def inventory_status(user: User = Depends(require_viewer), store: InventoryStore = Depends(get_store)):
    return ApiResponse[list[InventoryStatusOut]](
        message="Inventory status retrieved successfully",
        data=inventory_service.inventory_status(store),
    )


@router.get("/summary", response_model=ApiResponse[InventorySummaryOut])
def inventory_summary(user: User = Depends(require_viewer), store: InventoryStore = Depends(get_store)):
    return ApiResponse[InventorySummaryOut](
        message="Inventory summary retrieved successfully",
        data=inventory_service.inventory_summary(store),
    )


@router.get("/logs", response_model=PaginatedResponse[InventoryLogOut])
def inventory_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    product_id: str | None = Query(None, alias="productId"),
    user: User = Depends(require_viewer),
    store: InventoryStore = Depends(get_store),
):
    logs = inventory_service.list_logs(store, product_id=product_id)
    items, pagination = paginate(logs, page, limit)
    return PaginatedResponse[InventoryLogOut](
        message="Inventory logs retrieved successfully",
        data=items,
        pagination=pagination,
    )


@router.patch("/{product_id}", response_model=ApiResponse[StockUpdateOut])
def update_stock(
    product_id: str,
    data: StockUpdate,
    user: User = Depends(require_manager),
    mutator: StockMutator = Depends(get_stock_mutator),
):
    result = mutator.update_stock(product_id, data.stock, user.id, data.reason)
    return ApiResponse[StockUpdateOut](message="Stock updated successfully", data=result)
