"""In-memory wish repository."""

import threading
from dataclasses import dataclass, field
from uuid import UUID

from wish_service.domain.wishes import WishRecord
from wish_service.services.wishes import WishRepository


@dataclass
class InMemoryWishRepository(WishRepository):
    """Append-only wish store held in process memory.

    Inserts run in the threadpool, so appends and snapshots share a lock to
    keep insertion order and id uniqueness intact.
    """

    _records: list[WishRecord] = field(default_factory=list)
    _ids: set[UUID] = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def add(self, record: WishRecord) -> None:
        """Append a record, rejecting duplicate ids."""
        with self._lock:
            if record.id in self._ids:
                raise ValueError(f"Duplicate wish id: {record.id}")
            self._ids.add(record.id)
            self._records.append(record)

    def list_all(self) -> list[WishRecord]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
