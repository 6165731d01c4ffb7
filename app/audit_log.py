import threading
from datetime import timedelta

from app.clock import SystemClock
from app.models.inventory_log import InventoryLog


class AuditLog:
    """Append-only record of stock changes.

    There is no update or delete. Entries are frozen dataclasses, so the
    values handed out can't be used to alter what is stored.
    """

    def __init__(self, clock=None):
        self.clock = clock or SystemClock()
        self._entries: list[InventoryLog] = []
        self._lock = threading.Lock()

    def append(self, entry: InventoryLog) -> InventoryLog:
        with self._lock:
            self._entries.append(entry)
        return entry

    def _newest_first(self, entries: list[tuple[int, InventoryLog]]) -> list[InventoryLog]:
        # Same timestamp: later appends come first
        ordered = sorted(entries, key=lambda pair: (pair[1].timestamp, pair[0]), reverse=True)
        return [entry for _, entry in ordered]

    def _select(self, predicate=None) -> list[InventoryLog]:
        with self._lock:
            snapshot = list(enumerate(self._entries))
        if predicate is not None:
            snapshot = [pair for pair in snapshot if predicate(pair[1])]
        return self._newest_first(snapshot)

    def list_all(self) -> list[InventoryLog]:
        return self._select()

    def get(self, log_id: str) -> InventoryLog | None:
        with self._lock:
            for entry in self._entries:
                if entry.id == log_id:
                    return entry
        return None

    def list_by_product(self, product_id: str) -> list[InventoryLog]:
        return self._select(lambda e: e.product_id == product_id)

    def list_by_user(self, user_id: str) -> list[InventoryLog]:
        return self._select(lambda e: e.user_id == user_id)

    def list_by_warehouse(self, warehouse_id: str) -> list[InventoryLog]:
        return self._select(lambda e: e.warehouse_id == warehouse_id)

    def list_within_window(self, days: int) -> list[InventoryLog]:
        cutoff = self.clock.now() - timedelta(days=days)
        return self._select(lambda e: e.timestamp >= cutoff)

    def list_recent(self, limit: int = 10) -> list[InventoryLog]:
        return self.list_all()[:limit]

    def movements_for_product(self, product_id: str, days: int = 30) -> list[InventoryLog]:
        """Entries for one product inside the window, oldest first."""
        cutoff = self.clock.now() - timedelta(days=days)
        entries = self._select(lambda e: e.product_id == product_id and e.timestamp >= cutoff)
        entries.reverse()
        return entries

    def count_by_action(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        with self._lock:
            for entry in self._entries:
                counts[entry.action.value] = counts.get(entry.action.value, 0) + 1
        return counts

    def count(self) -> int:
        with self._lock:
            return len(self._entries)
