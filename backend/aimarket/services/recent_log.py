"""
Bounded, newest-first in-memory logs.

Backs the activation and brief histories. Entries are lost on restart.
"""
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class RecentLog(Generic[T]):
    """
    Fixed-capacity log keeping the most recent entries first.

    Mutations complete synchronously, so handlers running on one event loop
    never observe a partially updated log.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("RecentLog capacity must be at least 1")
        self.capacity = capacity
        self._entries: List[T] = []

    def record(self, entry: T) -> T:
        """Prepend `entry`, evicting the oldest entries beyond capacity."""
        self._entries.insert(0, entry)
        del self._entries[self.capacity:]
        return entry

    def list(self) -> List[T]:
        """Snapshot of the entries, newest first."""
        return list(self._entries)

    def latest(self) -> Optional[T]:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)
