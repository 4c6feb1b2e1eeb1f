"""
CircularBuffer for bounded, ordered storage with O(1) insertion and access.
Backs the event log and the recent level history.
"""
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """
    Fixed-capacity ring buffer.
    - O(1) insertion at the end
    - O(1) indexed reads in insertion order
    - Fixed capacity, overwrites oldest when full
    - Insertion order is preserved; no re-ordering, no dedup
    """

    __slots__ = ('capacity', 'buffer', 'write_index', 'count', '_mask')

    def __init__(self, capacity: int):
        """
        Initialize circular buffer.

        Args:
            capacity: Maximum number of entries to store
        """
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.buffer: List[Optional[T]] = [None] * capacity
        self.write_index = 0  # Next position to write
        self.count = 0  # Number of valid entries (0 to capacity)
        # Precompute mask for power-of-2 capacities (faster modulo)
        self._mask = capacity - 1 if (capacity & (capacity - 1)) == 0 else None

    def _physical(self, index: int) -> int:
        if self._mask is not None:
            return (self.write_index - self.count + index) & self._mask
        return (self.write_index - self.count + index) % self.capacity

    def append(self, item: T) -> None:
        """Add an entry, evicting the oldest when full. O(1)."""
        self.buffer[self.write_index] = item
        if self._mask is not None:
            self.write_index = (self.write_index + 1) & self._mask
        else:
            self.write_index = (self.write_index + 1) % self.capacity
        if self.count < self.capacity:
            self.count += 1

    def get_all(self) -> List[T]:
        """Get all valid entries in insertion order (oldest first)."""
        return [self.buffer[self._physical(i)] for i in range(self.count)]

    def __len__(self) -> int:
        """Number of valid entries."""
        return self.count
