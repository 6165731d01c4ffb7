from fastapi import APIRouter, Depends

from app.api.auth import require_admin, require_viewer
from app.limits import api_limit
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.warehouse import WarehouseCreate, WarehouseOut, WarehouseUpdate
from app.services import warehouse_service
from app.store import InventoryStore, get_store

router = APIRouter(prefix="/warehouses", tags=["Warehouses"], dependencies=[Depends(api_limit)])


@router.get("", response_model=ApiResponse[list[WarehouseOut]])
def list_warehouses(
    active: bool = False,
    user: User = Depends(require_viewer),
    store: InventoryStore = Depends(get_store),
):
    return ApiResponse[list[WarehouseOut]](
        message="Warehouses retrieved successfully",
        data=warehouse_service.list_warehouses(store, active_only=active),
    )


@router.get("/{warehouse_id}", response_model=ApiResponse[WarehouseOut])
def get_warehouse(warehouse_id: str, user: User = Depends(require_viewer), store: InventoryStore = Depends(get_store)):
    return ApiResponse[WarehouseOut](
        message="Warehouse retrieved successfully",
        data=warehouse_service.get_warehouse(store, warehouse_id),
    )


@router.post("", response_model=ApiResponse[WarehouseOut], status_code=201)
def create_warehouse(data: WarehouseCreate, user: User = Depends(require_admin), store: InventoryStore = Depends(get_store)):
    warehouse = warehouse_service.create_warehouse(store, data, user_id=user.id)
    return ApiResponse[WarehouseOut](message="Warehouse created successfully", data=warehouse)


@router.put("/{warehouse_id}", response_model=ApiResponse[WarehouseOut])
def update_warehouse(
    warehouse_id: str,
    data: WarehouseUpdate,
    user: User = Depends(require_admin),
    store: InventoryStore = Depends(get_store),
):
    warehouse = warehouse_service.update_warehouse(store, warehouse_id, data, user_id=user.id)
    return ApiResponse[WarehouseOut](message="Warehouse updated successfully", data=warehouse)


@router.delete("/{warehouse_id}", response_model=ApiResponse[None])
def delete_warehouse(warehouse_id: str, user: User = Depends(require_admin), store: InventoryStore = Depends(get_store)):
    warehouse_service.delete_warehouse(store, warehouse_id, user_id=user.id)
    return ApiResponse[None](message="Warehouse deleted successfully")
