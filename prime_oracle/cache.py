"""
Append-only prime cache backed by a growable int64 buffer.
"""

import numpy as np
from typing import Optional


class PrimeCache:
    """
    Ordered store of the first K primes. Entries are only ever appended;
    cache[i] is the i-th prime (0-indexed) for every i < len(cache).

    Storage doubles on demand, so appending a window of primes is
    amortised O(window) and reads never copy.
    """

    def __init__(self, initial_capacity: int = 1024):
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        self._buffer = np.empty(initial_capacity, dtype=np.int64)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, i: int) -> int:
        if i < 0 or i >= self._size:
            raise IndexError(f"cache index {i} out of range (size {self._size})")
        return int(self._buffer[i])

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def last(self) -> Optional[int]:
        """Largest cached prime, or None when empty."""
        if self._size == 0:
            return None
        return int(self._buffer[self._size - 1])

    def view(self) -> np.ndarray:
        """Read-only view of the cached primes."""
        v = self._buffer[: self._size]
        v.flags.writeable = False
        return v

    def primes_up_to(self, limit: int) -> np.ndarray:
        """Cached primes <= limit, as a read-only view."""
        stop = int(np.searchsorted(self._buffer[: self._size], limit, side="right"))
        v = self._buffer[:stop]
        v.flags.writeable = False
        return v

    def covers(self, limit: int) -> bool:
        """True when every prime <= limit is already cached."""
        return self._size > 0 and self.last >= limit

    def _reserve(self, size: int) -> None:
        if size <= len(self._buffer):
            return
        capacity = len(self._buffer)
        while capacity < size:
            capacity *= 2
        grown = np.empty(capacity, dtype=np.int64)
        grown[: self._size] = self._buffer[: self._size]
        self._buffer = grown

    def extend(self, primes: np.ndarray) -> int:
        """
        Append primes that lie beyond the current frontier.

        Values <= the last cached prime are skipped, so merging an
        overlapping sorted run never creates duplicates. Returns the
        number of entries appended.
        """
        primes = np.asarray(primes, dtype=np.int64)
        if self._size > 0:
            primes = primes[primes > self._buffer[self._size - 1]]
        count = len(primes)
        if count == 0:
            return 0
        if count > 1 and np.any(np.diff(primes) <= 0):
            raise ValueError("primes must be strictly increasing")
        self._reserve(self._size + count)
        self._buffer[self._size : self._size + count] = primes
        self._size += count
        return count
