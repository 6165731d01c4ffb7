import logging

from app.errors import NotFoundError
from app.models.warehouse import Warehouse
from app.schemas.warehouse import WarehouseCreate, WarehouseUpdate
from app.store import InventoryStore

logger = logging.getLogger(__name__)


def list_warehouses(store: InventoryStore, active_only: bool = False) -> list[Warehouse]:
    if active_only:
        return store.warehouses.find_active()
    return store.warehouses.find_all()


def get_warehouse(store: InventoryStore, warehouse_id: str) -> Warehouse:
    warehouse = store.warehouses.get(warehouse_id)
    if not warehouse:
        raise NotFoundError("Warehouse not found")
    return warehouse


def create_warehouse(store: InventoryStore, data: WarehouseCreate, user_id: str | None = None) -> Warehouse:
    warehouse = store.warehouses.create(**data.model_dump())
    logger.info("Warehouse created: %s (%s) by %s", warehouse.id, warehouse.name, user_id)
    return warehouse


def update_warehouse(
    store: InventoryStore, warehouse_id: str, data: WarehouseUpdate, user_id: str | None = None
) -> Warehouse:
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    warehouse = store.warehouses.update(warehouse_id, **changes)
    if not warehouse:
        raise NotFoundError("Warehouse not found")
    logger.info("Warehouse updated: %s by %s", warehouse_id, user_id)
    return warehouse


def delete_warehouse(store: InventoryStore, warehouse_id: str, user_id: str | None = None) -> None:
    """Remove a warehouse. Products that point at it keep the stale id."""
    if not store.warehouses.delete(warehouse_id):
        raise NotFoundError("Warehouse not found")
    logger.info("Warehouse deleted: %s by %s", warehouse_id, user_id)
