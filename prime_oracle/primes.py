"""
Sieve kernels: the full Sieve of Eratosthenes for base primes and the
windowed sieve used to walk past the cache frontier.
"""

import numpy as np


def primes_up_to(limit: int) -> np.ndarray:
    """Sieve of Eratosthenes returning array of primes up to limit."""
    if limit < 2:
        return np.empty(0, dtype=np.int64)
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[0:2] = False
    i = 2
    while i * i <= limit:
        if is_prime[i]:
            is_prime[i * i :: i] = False
        i += 1
    return np.nonzero(is_prime)[0].astype(np.int64)


def sieve_segment(low: int, high: int, base_primes: np.ndarray) -> np.ndarray:
    """
    Survivors in [low, high] after crossing off every multiple of every
    base prime, in increasing order.

    Crossing starts at the first multiple >= low, so a base prime lying
    inside the window crosses itself off. Callers get base primes into
    their results separately.
    """
    if high < low:
        return np.empty(0, dtype=np.int64)
    segment = np.ones(high - low + 1, dtype=bool)
    # 0 and 1 are never prime
    if low < 2:
        segment[: min(2 - low, len(segment))] = False

    for p in base_primes:
        p = int(p)
        first = ((low + p - 1) // p) * p
        if first > high:
            continue
        segment[first - low :: p] = False

    return np.flatnonzero(segment).astype(np.int64) + low
