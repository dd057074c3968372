"""
Analytic upper bound for the n-th prime.

Rosser's theorem: for k >= 6 the k-th prime (1-indexed) satisfies
    p_k < k * (ln k + ln ln k).
The oracle is 0-indexed, so index n asks for the (n + 1)-th prime.
For indices 1..5 the theorem does not apply; the constant margin covers
them (the largest, index 5 -> 13, gets a bound of 25).
"""

import math


DEFAULT_MARGIN = 10


def estimate_upper_bound(n: int, margin: int = DEFAULT_MARGIN) -> int:
    """
    Upper limit B such that the n-th prime (0-indexed) is <= B.

    B = floor(k * (ln k + ln ln k)) + 1 + margin, with k = n + 1.
    Index 0 is excluded: ln ln 1 is undefined, and the answer is 2 anyway.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1 for the Rosser bound, got {n}")
    if margin < 0:
        raise ValueError(f"margin must be >= 0, got {margin}")
    k = float(n + 1)
    return int(k * (math.log(k) + math.log(math.log(k)))) + 1 + margin


def base_prime_limit(bound: int) -> int:
    """Largest candidate factor needed to sieve every composite <= bound."""
    return math.isqrt(bound) + 1
