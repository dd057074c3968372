"""
Invariant validators for the Prime Oracle.

If any invariant fails, the cache cannot be trusted and neither can any
answer read from it.

1. Known Values: reference primes at fixed indices.
2. Small-Index Bounds: the Rosser bound plus margin contains p_n for n in 1..5,
   where the theorem itself gives no guarantee.
3. Cache Integrity: exactly the primes up to the last entry, in order.
4. Idempotence: a repeated query is a cache hit and sieves nothing.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional

from .bounds import estimate_upper_bound
from .engine import PrimeOracle, PrimeOracleError
from .primes import primes_up_to


# 0-indexed reference values
KNOWN_PRIMES = {
    0: 2,
    1: 3,
    2: 5,
    3: 7,
    4: 11,
    5: 13,
    19: 71,
    99: 541,
    500: 3581,
    986: 7793,
    2000: 17393,
    1_000_000: 15_485_867,
    10_000_000: 179_424_691,
}


class CacheCorruptionError(PrimeOracleError):
    """Raised when the cache is not a strictly increasing run of primes from 2."""
    pass


@dataclass
class InvariantResult:
    name: str
    passed: bool
    details: Dict[str, float]
    message: str


def check_known_values(oracle: PrimeOracle, max_index: int) -> InvariantResult:
    """Compare the oracle against every reference index <= max_index."""
    checked = {n: p for n, p in KNOWN_PRIMES.items() if n <= max_index}
    mismatches = {}
    for n, expected in checked.items():
        got = oracle.nth_prime(n)
        if got != expected:
            mismatches[n] = got

    passed = not mismatches
    if passed:
        message = f"{len(checked)} reference indices match (up to n={max_index})"
    else:
        worst = ", ".join(f"n={n}: got {mismatches[n]}, want {KNOWN_PRIMES[n]}"
                          for n in sorted(mismatches))
        message = f"Mismatched reference values: {worst}"

    return InvariantResult(
        name="Known Values",
        passed=passed,
        details={"checked": len(checked), "mismatches": len(mismatches)},
        message=message,
    )


def check_small_index_bounds(oracle: PrimeOracle) -> InvariantResult:
    """
    Rosser's theorem needs k >= 6 (k = n + 1). Below that only the constant
    margin protects the estimate, so check it against the true primes.
    """
    margin = oracle.config.bound_margin
    slack = {}
    for n in range(1, 6):
        slack[n] = estimate_upper_bound(n, margin) - KNOWN_PRIMES[n]
    min_slack = min(slack.values())
    passed = min_slack >= 0

    return InvariantResult(
        name="Small-Index Bounds",
        passed=passed,
        details={"margin": margin, "min_slack": min_slack},
        message=(
            f"Bound - p_n for n=1..5 with margin {margin}: "
            f"min slack {min_slack} "
            f"({'contained' if passed else 'BOUND TOO LOW'})"
        ),
    )


def check_cache_integrity(oracle: PrimeOracle) -> InvariantResult:
    """
    The cache is exactly the primes up to its last entry: strictly
    increasing from 2, no composites, no gaps.

    Compared against a full (unsegmented) sieve to the last entry, so this
    costs O(largest cached prime) memory. Raises CacheCorruptionError on
    ordering failures.
    """
    primes = oracle.primes
    size = len(primes)
    if size == 0:
        return InvariantResult(
            name="Cache Integrity",
            passed=True,
            details={"size": 0},
            message="Cache empty",
        )

    if primes[0] != 2 or np.any(np.diff(primes) <= 0):
        raise CacheCorruptionError(
            f"CACHE CORRUPTION: cache of {size} entries is not a strictly "
            f"increasing run starting at 2 (first entry {int(primes[0])})."
        )

    last = int(primes[-1])
    reference = primes_up_to(last)
    composite = len(np.setdiff1d(primes, reference, assume_unique=True))
    missing = len(np.setdiff1d(reference, primes, assume_unique=True))
    passed = composite == 0 and missing == 0

    return InvariantResult(
        name="Cache Integrity",
        passed=passed,
        details={"size": size, "largest": last,
                 "composite_entries": composite, "missing_primes": missing},
        message=(
            f"{size} cached primes, largest {last}: "
            f"{composite} composite entries, {missing} gaps"
        ),
    )


def check_idempotence(oracle: PrimeOracle, n: int) -> InvariantResult:
    """Repeat a query and confirm the answer is stable and served from cache."""
    first = oracle.nth_prime(n)
    before = oracle.stats
    second = oracle.nth_prime(n)
    after = oracle.stats

    new_segments = after.segments_sieved - before.segments_sieved
    new_base = after.base_sieves - before.base_sieves
    passed = first == second and new_segments == 0 and new_base == 0

    return InvariantResult(
        name="Idempotence",
        passed=passed,
        details={"index": n, "new_segments": new_segments, "new_base_sieves": new_base},
        message=(
            f"nth_prime({n}) = {first} then {second}; "
            f"{new_segments} segments and {new_base} base sieves on repeat"
        ),
    )


def run_all_invariants(oracle: Optional[PrimeOracle] = None,
                       max_index: int = 2000) -> list:
    """
    Run all invariant checks. Returns list of InvariantResult.
    Raises CacheCorruptionError if the cache ordering is broken.
    """
    if oracle is None:
        oracle = PrimeOracle()

    results = []
    results.append(check_small_index_bounds(oracle))
    results.append(check_known_values(oracle, max_index))
    results.append(check_idempotence(oracle, max_index))
    results.append(check_cache_integrity(oracle))  # Raises on failure
    return results
