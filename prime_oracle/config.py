"""
Sieve configuration for the Prime Oracle.

Controls the two numeric dials: segment width (W) and the safety margin
added to the Rosser bound. Includes validation and memory estimation.
"""

import warnings
import numpy as np
from dataclasses import dataclass


# Below this width the per-window setup cost outweighs the sieving work.
MIN_EFFICIENT_SEGMENT = 1_000


@dataclass
class SieveConfig:
    segment_size: int = 1_000_000
    bound_margin: int = 10
    thread_safe: bool = True

    def __post_init__(self):
        if self.segment_size < 1:
            raise ValueError(f"segment_size must be >= 1, got {self.segment_size}")
        if self.bound_margin < 0:
            raise ValueError(f"bound_margin must be >= 0, got {self.bound_margin}")

        if self.segment_size < MIN_EFFICIENT_SEGMENT:
            warnings.warn(
                f"Segment too small: segment_size={self.segment_size} < "
                f"{MIN_EFFICIENT_SEGMENT}. Sieving will spend most of its time "
                f"on window setup. Increase segment_size.",
                stacklevel=2,
            )

    def segment_memory_mb(self) -> float:
        """Bytes held by one boolean window, in MB."""
        return self.segment_size * np.dtype(np.bool_).itemsize / (1024 * 1024)

    def cache_memory_mb(self, n: int) -> float:
        """Bytes held by a cache covering index n (int64 entries), in MB."""
        return (max(n, 0) + 1) * np.dtype(np.int64).itemsize / (1024 * 1024)

    def memory_estimate_mb(self, n: int) -> float:
        """Estimate peak memory in MB for answering index n from an empty cache."""
        from .bounds import estimate_upper_bound, base_prime_limit
        if n < 1:
            return self.cache_memory_mb(0)
        bound = estimate_upper_bound(n, self.bound_margin)
        # Base sieve: one bool per integer up to sqrt(bound)
        base_bytes = base_prime_limit(bound) + 1
        window = min(self.segment_size, bound)
        # Window flags plus the int64 survivors extracted from them
        segment_bytes = window * (1 + np.dtype(np.int64).itemsize)
        # The cache buffer may be up to twice its length after a doubling
        cache_mb = 2 * self.cache_memory_mb(n)
        return (base_bytes + segment_bytes) / (1024 * 1024) + cache_mb

    @classmethod
    def small(cls) -> "SieveConfig":
        return cls(segment_size=65_536)

    @classmethod
    def default(cls) -> "SieveConfig":
        return cls()

    @classmethod
    def large(cls) -> "SieveConfig":
        return cls(segment_size=8_000_000)
