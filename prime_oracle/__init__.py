"""
Prime Oracle -- cached segmented sieve.

Computes the n-th prime (0-indexed) for large n by extending an
append-only prime cache with a segmented Sieve of Eratosthenes bounded
by Rosser's theorem.
"""

__version__ = "1.0.0"

from .config import SieveConfig
from .engine import (
    PrimeOracle,
    UncachedOracle,
    NthPrimeSource,
    SieveStats,
    PrimeOracleError,
    InvalidIndexError,
    BoundExceededError,
)
from .cache import PrimeCache
from .bounds import estimate_upper_bound, base_prime_limit
from .primes import primes_up_to, sieve_segment
from .invariants import run_all_invariants, CacheCorruptionError
