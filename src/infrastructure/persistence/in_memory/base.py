"""Shared storage for the in-memory repository adapters.

Records are kept in insertion order; lookups scan the list and return the
first match. Nothing is persisted beyond the process.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """List-backed record store.

    Attributes:
        _records: Stored records in insertion order.
    """

    def __init__(self) -> None:
        self._records: list[T] = []

    async def add(self, record: T) -> None:
        """Append a record (no uniqueness check)."""
        self._records.append(record)

    def _first(self, predicate: Callable[[T], bool]) -> T | None:
        return next((record for record in self._records if predicate(record)), None)

    def __len__(self) -> int:
        return len(self._records)
