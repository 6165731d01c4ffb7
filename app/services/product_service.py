import logging

from app.errors import ConflictError, NotFoundError
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.inventory_service import StockMutator
from app.store import InventoryStore

logger = logging.getLogger(__name__)


def create_product(store: InventoryStore, data: ProductCreate, user_id: str | None = None) -> Product:
    if store.products.find_by_sku(data.sku):
        raise ConflictError("Product with this SKU already exists")
    product = store.products.create(**data.model_dump())
    logger.info("Product created: %s (%s) by %s", product.id, product.sku, user_id)
    return product


def get_product(store: InventoryStore, product_id: str) -> Product:
    product = store.products.get(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product


def list_products(store: InventoryStore, category: str | None = None) -> list[Product]:
    if category:
        return store.products.find_by_category(category)
    return store.products.find_all()


def get_low_stock(store: InventoryStore) -> list[Product]:
    return store.products.find_low_stock()


def update_product(store: InventoryStore, product_id: str, data: ProductUpdate, user_id: str) -> Product:
    existing = get_product(store, product_id)
    update_data = {
        k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None or k == "warehouse_id"
    }

    new_sku = update_data.get("sku")
    if new_sku and new_sku != existing.sku and store.products.find_by_sku(new_sku):
        raise ConflictError("Product with this SKU already exists")

    # Stock goes through the mutator so the change is audited; an unchanged value is not a movement
    new_stock = update_data.pop("stock", None)

    product = store.products.update(product_id, **update_data)
    if product is None:
        raise NotFoundError("Product not found")
    if new_stock is not None and new_stock != existing.stock:
        StockMutator(store).update_stock(product_id, new_stock, user_id, reason="Product update")
        product = get_product(store, product_id)

    logger.info("Product updated: %s (%s) by %s", product_id, product.sku, user_id)
    return product


def delete_product(store: InventoryStore, product_id: str, user_id: str | None = None) -> None:
    product = get_product(store, product_id)
    if not store.products.delete(product_id):
        raise NotFoundError("Product not found")
    logger.info("Product deleted: %s (%s) by %s", product_id, product.sku, user_id)
