import logging
from dataclasses import dataclass
from datetime import datetime

from app.errors import NotFoundError, ValidationError
from app.models.inventory_log import InventoryLog, LogAction
from app.store import InventoryStore, new_id

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Stock update"


@dataclass(frozen=True)
class StockUpdateResult:
    product_id: str
    previous_stock: int
    updated_stock: int
    updated_at: datetime


def action_for_delta(delta: int) -> LogAction:
    # Only growth is labelled "add"; decreases and no-ops are "update".
    return LogAction.ADD if delta > 0 else LogAction.UPDATE


class StockMutator:
    """Sets a product's stock and records the matching audit entry."""

    def __init__(self, store: InventoryStore):
        self.store = store

    def update_stock(
        self,
        product_id: str,
        new_stock: int,
        user_id: str,
        reason: str | None = None,
    ) -> StockUpdateResult:
        if isinstance(new_stock, bool) or not isinstance(new_stock, int):
            raise ValidationError('"stock" must be a number')
        if new_stock < 0:
            raise ValidationError('"stock" must be greater than or equal to 0')
        if self.store.products.get(product_id) is None:
            raise NotFoundError("Product not found")

        with self.store.product_locks(product_id):
            product = self.store.products.get(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            previous_stock = product.stock
            updated = self.store.products.update(product_id, stock=new_stock)
            if updated is None:
                raise NotFoundError("Product not found")

            quantity = new_stock - previous_stock
            entry = InventoryLog(
                id=new_id("log"),
                product_id=product_id,
                warehouse_id=product.warehouse_id,
                user_id=user_id,
                action=action_for_delta(quantity),
                previous_stock=previous_stock,
                new_stock=new_stock,
                quantity=quantity,
                reason=reason or DEFAULT_REASON,
                timestamp=self.store.clock.now(),
            )
            try:
                self.store.inventory_logs.append(entry)
            except Exception:
                self.store.products.update(product_id, stock=previous_stock, updated_at=product.updated_at)
                raise

        logger.info(
            "Stock updated for %s (%s): %d -> %d by %s",
            product_id, product.sku, previous_stock, new_stock, user_id,
        )
        return StockUpdateResult(
            product_id=product_id,
            previous_stock=previous_stock,
            updated_stock=new_stock,
            updated_at=updated.updated_at,
        )


def inventory_status(store: InventoryStore) -> list[dict]:
    return [
        {
            "product_id": p.id,
            "product_name": p.name,
            "sku": p.sku,
            "category": p.category,
            "current_stock": p.stock,
            "min_stock": p.min_stock,
            "warehouse": store.warehouse_name(p.warehouse_id),
            "last_updated": p.updated_at,
        }
        for p in store.products.find_all()
    ]


def inventory_summary(store: InventoryStore) -> dict:
    products = store.products.find_all()
    return {
        "total_products": len(products),
        "total_stock_value": round(sum(p.stock_value for p in products), 2),
        "low_stock_products": sum(1 for p in products if p.is_low_stock),
        "out_of_stock_products": sum(1 for p in products if p.stock == 0),
        "recent_movements": store.inventory_logs.list_recent(5),
        "category_breakdown": store.products.count_by_category(),
    }


def list_logs(store: InventoryStore, product_id: str | None = None) -> list[InventoryLog]:
    if product_id:
        return store.inventory_logs.list_by_product(product_id)
    return store.inventory_logs.list_all()
