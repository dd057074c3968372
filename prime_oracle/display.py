"""
Output formatting for terminal reports.
"""

from typing import Dict, List

from .config import SieveConfig
from .bounds import estimate_upper_bound, base_prime_limit
from .engine import SieveStats


def format_invariant_report(results: list) -> str:
    """Format invariant check results for terminal output."""
    lines = []
    lines.append("=" * 60)
    lines.append("  INVARIANT VALIDATION REPORT")
    lines.append("=" * 60)

    all_passed = True
    for r in results:
        status = "PASS" if r.passed else "FAIL"
        marker = " [+]" if r.passed else " [X]"
        lines.append(f"{marker} {r.name}: {status}")
        lines.append(f"      {r.message}")
        if not r.passed:
            all_passed = False

    lines.append("-" * 60)
    if all_passed:
        lines.append("  ORACLE NOMINAL: All invariants hold.")
    else:
        lines.append("  ORACLE COMPROMISED: One or more invariants failed.")
    lines.append("=" * 60)

    return "\n".join(lines)


def format_answers(answers: Dict[int, int]) -> str:
    """One 'n -> p' line per query, indices right-aligned."""
    if not answers:
        return ""
    width = max(len(f"{n:,}") for n in answers)
    return "\n".join(f"  {n:>{width},} -> {p:,}" for n, p in answers.items())


def format_primes(primes: List[int], csv: bool = False) -> str:
    if csv:
        return ",".join(map(str, primes))
    return "\n".join(map(str, primes))


def format_stats(stats: SieveStats, cache_size: int) -> str:
    """Format the oracle's work counters."""
    lines = []
    lines.append(f"  Queries:          {stats.queries}")
    lines.append(f"  Cache hits:       {stats.cache_hits}")
    lines.append(f"  Base sieves:      {stats.base_sieves}")
    lines.append(f"  Segments sieved:  {stats.segments_sieved}")
    lines.append(f"  Numbers sieved:   {stats.numbers_sieved:,}")
    lines.append(f"  Cached primes:    {cache_size:,}")
    return "\n".join(lines)


def format_config(cfg: SieveConfig, n: int) -> str:
    """System information block for `info`."""
    lines = []
    lines.append("=" * 50)
    lines.append("  PRIME ORACLE - System Information")
    lines.append("=" * 50)
    lines.append(f"  Segment width (W):     {cfg.segment_size:,}")
    lines.append(f"  Bound margin:          {cfg.bound_margin}")
    lines.append(f"  Thread safe:           {cfg.thread_safe}")
    lines.append(f"  Segment memory:        {cfg.segment_memory_mb():.2f} MB")

    if n >= 1:
        bound = estimate_upper_bound(n, cfg.bound_margin)
        windows = -(-bound // cfg.segment_size)
        lines.append(f"\n  For index n = {n:,}:")
        lines.append(f"    Rosser bound:        {bound:,}")
        lines.append(f"    Base prime limit:    {base_prime_limit(bound):,}")
        lines.append(f"    Windows (cold):      {windows:,}")
        lines.append(f"    Estimated memory:    {cfg.memory_estimate_mb(n):.1f} MB")

    lines.append("=" * 50)
    return "\n".join(lines)
