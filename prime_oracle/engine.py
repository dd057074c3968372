"""
Prime Oracle -- the core computation pipeline.

Answers "what is the n-th prime?" (0-indexed) from an append-only cache,
extending the cache with a segmented Sieve of Eratosthenes whenever the
query lies past the frontier:

    query -> cache -> Rosser bound -> base primes -> windows -> cache[n]

Primes are facts: once appended they are never rewritten, so a cache hit
is always safe and the cache only grows.
"""

import logging
import threading
import numpy as np
from dataclasses import dataclass, replace
from typing import List, Optional, Protocol, runtime_checkable

from .config import SieveConfig
from .cache import PrimeCache
from .bounds import estimate_upper_bound, base_prime_limit
from .primes import primes_up_to, sieve_segment


logger = logging.getLogger(__name__)


class PrimeOracleError(Exception):
    """Base class for oracle failures."""
    pass


class InvalidIndexError(PrimeOracleError, ValueError):
    """Raised when a negative index is requested."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"prime index must be non-negative, got {index}")


class BoundExceededError(PrimeOracleError, RuntimeError):
    """Raised when sieving up to the estimated bound did not reach the index."""

    def __init__(self, index: int, bound: int, found: int):
        self.index = index
        self.bound = bound
        self.found = found
        super().__init__(
            f"upper bound {bound} too low for index {index}: "
            f"only {found} primes cached after sieving to the bound"
        )


@runtime_checkable
class NthPrimeSource(Protocol):
    def nth_prime(self, n: int) -> int:
        """Return the n-th prime, 0-indexed (0 -> 2)."""
        ...


@dataclass
class SieveStats:
    queries: int = 0
    cache_hits: int = 0
    base_sieves: int = 0
    segments_sieved: int = 0
    numbers_sieved: int = 0


class PrimeOracle:
    """
    Caching n-th prime oracle. One instance owns one cache; nothing is
    shared between instances.

    Usage:
        oracle = PrimeOracle()
        oracle.nth_prime(99)   # 541
        oracle.nth_prime(19)   # 71, straight from the cache
    """

    def __init__(self, config: Optional[SieveConfig] = None):
        if config is None:
            config = SieveConfig.default()
        self.config = config
        self._cache = PrimeCache()
        self._stats = SieveStats()
        self._lock = threading.Lock() if config.thread_safe else None

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    @property
    def primes(self) -> np.ndarray:
        return self._cache.view()

    @property
    def stats(self) -> SieveStats:
        return replace(self._stats)

    def nth_prime(self, n: int) -> int:
        """
        The n-th prime, 0-indexed.

        Raises InvalidIndexError for n < 0 and BoundExceededError if the
        Rosser bound ever fails to contain the answer.
        """
        if n < 0:
            raise InvalidIndexError(n)
        if self._lock is None:
            return self._nth_prime(n)
        with self._lock:
            return self._nth_prime(n)

    def first_primes(self, count: int) -> List[int]:
        """The first `count` primes, in order."""
        if count <= 0:
            return []
        # Index 0 is answered without touching the cache
        self.nth_prime(max(count - 1, 1))
        return self._cache.view()[:count].tolist()

    def _nth_prime(self, n: int) -> int:
        self._stats.queries += 1

        # The bound formula needs ln ln(n + 1) > -inf, so index 0 is fixed.
        if n == 0:
            self._stats.cache_hits += 1
            return 2

        if n < len(self._cache):
            self._stats.cache_hits += 1
            return self._cache[n]

        bound = estimate_upper_bound(n, self.config.bound_margin)
        # Resume just past the frontier; fixed before base primes are merged.
        start = 2 if self._cache.last is None else self._cache.last + 1
        logger.debug("index %d: bound %d, resuming at %d", n, bound, start)

        base = self._base_primes(bound)
        if n < len(self._cache):
            return self._cache[n]

        self._sieve_from(start, bound, base, n)
        if n >= len(self._cache):
            raise BoundExceededError(n, bound, len(self._cache))
        return self._cache[n]

    def _base_primes(self, bound: int) -> np.ndarray:
        """
        Primes up to sqrt(bound) + 1. Reused from the cache when it already
        reaches that far; otherwise sieved and merged into the cache.
        """
        limit = base_prime_limit(bound)
        if self._cache.covers(limit):
            return self._cache.primes_up_to(limit)

        base = primes_up_to(limit)
        self._stats.base_sieves += 1
        added = self._cache.extend(base)
        logger.debug("base sieve to %d: %d primes, %d new in cache",
                     limit, len(base), added)
        return base

    def _sieve_from(self, start: int, bound: int, base: np.ndarray, n: int) -> None:
        """Walk windows [low, low + W - 1] up to bound until index n is cached."""
        width = self.config.segment_size
        for low in range(start, bound + 1, width):
            high = min(low + width - 1, bound)
            found = sieve_segment(low, high, base)
            self._stats.segments_sieved += 1
            self._stats.numbers_sieved += high - low + 1

            needed = n + 1 - len(self._cache)
            self._cache.extend(found[:needed])
            if len(self._cache) > n:
                logger.debug("index %d reached in window [%d, %d]", n, low, high)
                return
        logger.debug("windows exhausted at %d with %d primes cached",
                     bound, len(self._cache))


class UncachedOracle:
    """
    Answers every query from scratch with a throwaway PrimeOracle.
    Baseline for benchmarks; satisfies NthPrimeSource.
    """

    def __init__(self, config: Optional[SieveConfig] = None):
        self.config = config if config is not None else SieveConfig.default()

    def nth_prime(self, n: int) -> int:
        return PrimeOracle(self.config).nth_prime(n)
