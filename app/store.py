"""In-memory entity store.

One repository per entity type. Every repository owns an RLock, so each
create/update/delete is atomic, and hands out copies so callers never see
later writes through a value they already hold.
"""
import dataclasses
import threading
import uuid
import weakref
from typing import Generic, TypeVar

from fastapi import Request

from app.audit_log import AuditLog
from app.clock import SystemClock
from app.errors import ConflictError
from app.models.product import Product
from app.models.user import User
from app.models.warehouse import Warehouse

T = TypeVar("T")


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class Repository(Generic[T]):
    id_prefix = "obj"

    def __init__(self, entity_type: type[T], clock=None):
        self.entity_type = entity_type
        self.clock = clock or SystemClock()
        self._items: dict[str, T] = {}
        self._lock = threading.RLock()

    def _check_unique(self, candidate: T, exclude_id: str | None = None) -> None:
        """Hook for subclasses with unique keys. Called with the lock held."""

    def get(self, entity_id: str) -> T | None:
        with self._lock:
            item = self._items.get(entity_id)
            return dataclasses.replace(item) if item is not None else None

    def find_all(self) -> list[T]:
        with self._lock:
            return [dataclasses.replace(item) for item in self._items.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def create(self, **data) -> T:
        now = self.clock.now()
        with self._lock:
            entity_id = data.pop("id", None) or new_id(self.id_prefix)
            if entity_id in self._items:
                raise ConflictError(f"{self.entity_type.__name__} {entity_id} already exists")
            data.setdefault("created_at", now)
            data.setdefault("updated_at", now)
            entity = self.entity_type(id=entity_id, **data)
            self._check_unique(entity)
            self._items[entity_id] = entity
            return dataclasses.replace(entity)

    def update(self, entity_id: str, **changes) -> T | None:
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            changes.pop("id", None)
            changes.setdefault("updated_at", self.clock.now())
            updated = dataclasses.replace(current, **changes)
            self._check_unique(updated, exclude_id=entity_id)
            self._items[entity_id] = updated
            return dataclasses.replace(updated)

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            return self._items.pop(entity_id, None) is not None


class ProductRepository(Repository[Product]):
    id_prefix = "prod"

    def __init__(self, clock=None):
        super().__init__(Product, clock)

    def _check_unique(self, candidate: Product, exclude_id: str | None = None) -> None:
        for item in self._items.values():
            if item.id != exclude_id and item.sku == candidate.sku:
                raise ConflictError("Product with this SKU already exists")

    def find_by_sku(self, sku: str) -> Product | None:
        with self._lock:
            for item in self._items.values():
                if item.sku == sku:
                    return dataclasses.replace(item)
        return None

    def find_by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        return [p for p in self.find_all() if p.category.lower() == wanted]

    def find_low_stock(self) -> list[Product]:
        return [p for p in self.find_all() if p.is_low_stock]

    def count_by_category(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for p in self.find_all():
            counts[p.category] = counts.get(p.category, 0) + 1
        return counts


class WarehouseRepository(Repository[Warehouse]):
    id_prefix = "wh"

    def __init__(self, clock=None):
        super().__init__(Warehouse, clock)

    def find_active(self) -> list[Warehouse]:
        return [w for w in self.find_all() if w.is_active]


class UserRepository(Repository[User]):
    id_prefix = "user"

    def __init__(self, clock=None):
        super().__init__(User, clock)

    def _check_unique(self, candidate: User, exclude_id: str | None = None) -> None:
        for item in self._items.values():
            if item.id != exclude_id and item.email == candidate.email:
                raise ConflictError("User already exists with this email")

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for item in self._items.values():
                if item.email == email:
                    return dataclasses.replace(item)
        return None


class KeyedLocks:
    """One lock per key, created on first use.

    Entries are weak: a lock disappears once no caller holds it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def __call__(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


class InventoryStore:
    def __init__(self, clock=None):
        self.clock = clock or SystemClock()
        self.products = ProductRepository(self.clock)
        self.warehouses = WarehouseRepository(self.clock)
        self.users = UserRepository(self.clock)
        self.inventory_logs = AuditLog(self.clock)
        # Serializes read-modify-append of stock per product id
        self.product_locks = KeyedLocks()

    def warehouse_name(self, warehouse_id: str | None) -> str:
        warehouse = self.warehouses.get(warehouse_id) if warehouse_id else None
        return warehouse.name if warehouse else "Unknown"


def get_store(request: Request) -> InventoryStore:
    return request.app.state.store
