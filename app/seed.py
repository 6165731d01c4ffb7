"""Demo data loaded into a fresh store at startup."""
import logging
from datetime import datetime, timezone

from app.models.inventory_log import InventoryLog, LogAction
from app.models.user import UserRole
from app.services.auth_service import hash_password
from app.store import InventoryStore

logger = logging.getLogger(__name__)

SEEDED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

WAREHOUSES = [
    {"id": "wh_main", "name": "Main Warehouse", "location": "123 Industrial Ave, City, State 12345",
     "capacity": 10000, "is_active": True},
    {"id": "wh_storage", "name": "Storage Facility", "location": "456 Storage Blvd, City, State 12346",
     "capacity": 5000, "is_active": True},
    {"id": "wh_backup", "name": "Backup Warehouse", "location": "789 Reserve St, City, State 12347",
     "capacity": 3000, "is_active": False},
]

PRODUCTS = [
    {"id": "prod_001", "name": "Laptop Dell XPS 15", "sku": "DX15-2025", "price": 1200.99,
     "category": "Electronics", "stock": 5, "min_stock": 10,
     "description": "High-performance laptop for professionals", "warehouse_id": "wh_main"},
    {"id": "prod_002", "name": "Wireless Mouse", "sku": "WM-2025", "price": 25.99,
     "category": "Electronics", "stock": 3, "min_stock": 15,
     "description": "Ergonomic wireless mouse", "warehouse_id": "wh_main"},
    {"id": "prod_003", "name": "Office Chair", "sku": "OC-2025", "price": 199.99,
     "category": "Furniture", "stock": 25, "min_stock": 5,
     "description": "Comfortable ergonomic office chair", "warehouse_id": "wh_main"},
    {"id": "prod_004", "name": "Printer Paper A4", "sku": "PP-A4-500", "price": 8.99,
     "category": "Office Supplies", "stock": 150, "min_stock": 20,
     "description": "500 sheets of A4 printer paper", "warehouse_id": "wh_storage"},
    {"id": "prod_005", "name": "Coffee Maker", "sku": "CM-DELUXE", "price": 89.99,
     "category": "Appliances", "stock": 12, "min_stock": 8,
     "description": "12-cup programmable coffee maker", "warehouse_id": "wh_main"},
]

# (id, email, password, name, role)
USERS = [
    ("user_admin_001", "admin@example.com", "Admin123!", "System Admin", UserRole.ADMIN),
    ("user_manager_001", "manager@example.com", "Password123", "Warehouse Manager", UserRole.MANAGER),
    ("user_viewer_001", "viewer@example.com", "Viewer123", "Inventory Viewer", UserRole.VIEWER),
]

LOGS = [
    InventoryLog(id="log_001", product_id="prod_001", warehouse_id="wh_main", user_id="user_manager_001",
                 action=LogAction.UPDATE, previous_stock=50, new_stock=45, quantity=-5,
                 reason="Sold to customer", timestamp=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)),
    InventoryLog(id="log_002", product_id="prod_002", warehouse_id="wh_main", user_id="user_manager_001",
                 action=LogAction.UPDATE, previous_stock=20, new_stock=15, quantity=-5,
                 reason="Inventory adjustment", timestamp=datetime(2024, 1, 14, 14, 30, tzinfo=timezone.utc)),
    InventoryLog(id="log_003", product_id="prod_003", warehouse_id="wh_main", user_id="user_admin_001",
                 action=LogAction.ADD, previous_stock=0, new_stock=25, quantity=25,
                 reason="Initial stock", timestamp=datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)),
    InventoryLog(id="log_004", product_id="prod_001", warehouse_id="wh_main", user_id="user_manager_001",
                 action=LogAction.UPDATE, previous_stock=45, new_stock=5, quantity=-40,
                 reason="Bulk sale", timestamp=datetime(2024, 1, 20, 16, 45, tzinfo=timezone.utc)),
]


def seed_store(store: InventoryStore) -> None:
    for data in WAREHOUSES:
        store.warehouses.create(**data, created_at=SEEDED_AT, updated_at=SEEDED_AT)
    for data in PRODUCTS:
        store.products.create(**data, created_at=SEEDED_AT, updated_at=SEEDED_AT)
    for user_id, email, password, name, role in USERS:
        store.users.create(
            id=user_id,
            email=email,
            name=name,
            password_hash=hash_password(password),
            role=role,
            is_active=True,
            created_at=SEEDED_AT,
            updated_at=SEEDED_AT,
        )
    for entry in LOGS:
        store.inventory_logs.append(entry)
    logger.info(
        "Seeded %d warehouses, %d products, %d users, %d log entries",
        store.warehouses.count(), store.products.count(), store.users.count(), store.inventory_logs.count(),
    )
