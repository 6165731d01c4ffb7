from app.store import InventoryStore

LOW_STOCK_COLUMNS = [
    ("product", "Product Name"),
    ("sku", "SKU"),
    ("stock", "Current Stock"),
    ("warehouse", "Warehouse"),
    ("min_stock", "Minimum Stock"),
]

INVENTORY_COLUMNS = [
    ("product_name", "Product Name"),
    ("sku", "SKU"),
    ("category", "Category"),
    ("current_stock", "Current Stock"),
    ("min_stock", "Minimum Stock"),
    ("warehouse", "Warehouse"),
    ("last_updated", "Last Updated"),
]

MOVEMENT_COLUMNS = [
    ("date", "Date"),
    ("product", "Product"),
    ("sku", "SKU"),
    ("action", "Action"),
    ("quantity", "Quantity"),
    ("previous_stock", "Previous Stock"),
    ("new_stock", "New Stock"),
    ("warehouse", "Warehouse"),
    ("reason", "Reason"),
]


def low_stock_report(store: InventoryStore) -> list[dict]:
    return [
        {
            "product": p.name,
            "sku": p.sku,
            "stock": p.stock,
            "warehouse": store.warehouse_name(p.warehouse_id),
            "min_stock": p.min_stock,
        }
        for p in store.products.find_low_stock()
    ]


def inventory_report(store: InventoryStore) -> list[dict]:
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


def movement_report(store: InventoryStore, days: int = 30) -> list[dict]:
    """Stock changes in the last `days` days, with product and warehouse names resolved."""
    products = {p.id: p for p in store.products.find_all()}
    rows = []
    for log in store.inventory_logs.list_within_window(days):
        product = products.get(log.product_id)
        rows.append({
            "date": log.timestamp,
            "product": product.name if product else "Unknown",
            "sku": product.sku if product else "Unknown",
            "action": log.action.value,
            "quantity": log.quantity,
            "previous_stock": log.previous_stock,
            "new_stock": log.new_stock,
            "warehouse": store.warehouse_name(log.warehouse_id),
            "reason": log.reason or "N/A",
        })
    return rows
