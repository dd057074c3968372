"""
Cached vs uncached n-th prime timings.

Two passes over the same index set:
  Uncached: every query starts from an empty cache (UncachedOracle).
  Cached:   one PrimeOracle pre-filled in steps of 100,000 up to the
            largest index, then every query is a cache hit.

Usage:
    python scripts/benchmark_oracle.py              # full run, up to n = 10,000,000
    python scripts/benchmark_oracle.py --smoke      # quick test, up to n = 100,000
"""

import sys
import os
import time
import argparse

from tqdm import tqdm

# Allow running as `python scripts/benchmark_oracle.py` without install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from prime_oracle.config import SieveConfig
from prime_oracle.engine import PrimeOracle, UncachedOracle, NthPrimeSource


# --- Constants ---

BENCHMARKS = [
    ("Small",      19),
    ("Medium",     500),
    ("Large",      1_000_000),
    ("ExtraLarge", 10_000_000),
]

SMOKE_BENCHMARKS = [
    ("Small",  19),
    ("Medium", 500),
    ("Large",  100_000),
]

PREFILL_STEP = 100_000


def time_queries(source: NthPrimeSource, index: int, repeats: int) -> float:
    """Mean seconds per nth_prime(index) call over `repeats` calls."""
    t0 = time.perf_counter()
    for _ in range(repeats):
        source.nth_prime(index)
    return (time.perf_counter() - t0) / repeats


def prefill(oracle: PrimeOracle, max_index: int) -> None:
    """Grow the cache in PREFILL_STEP increments up to max_index."""
    steps = list(range(0, max_index + 1, PREFILL_STEP))
    if steps[-1] != max_index:
        steps.append(max_index)
    for n in tqdm(steps, desc="Pre-filling cache", unit="step"):
        oracle.nth_prime(n)


def main():
    parser = argparse.ArgumentParser(description="Benchmark the Prime Oracle")
    parser.add_argument("--smoke", action="store_true",
                        help="Quick smoke test with reduced indices")
    parser.add_argument("--repeats", type=int, default=3,
                        help="Uncached calls per index (cached uses 1000x)")
    parser.add_argument("--segment-size", type=int, default=None,
                        help="Segment width W")
    args = parser.parse_args()

    benchmarks = SMOKE_BENCHMARKS if args.smoke else BENCHMARKS
    if args.smoke:
        print("SMOKE TEST MODE: reduced indices for quick verification\n")

    if args.segment_size is not None:
        cfg = SieveConfig(segment_size=args.segment_size)
    else:
        cfg = SieveConfig.default()

    total_t0 = time.time()
    max_index = max(n for _, n in benchmarks)

    print(f"{'='*60}")
    print(f"  Uncached  (W={cfg.segment_size:,}, {args.repeats} calls/index)")
    print(f"{'='*60}")
    uncached = UncachedOracle(cfg)
    uncached_times = {}
    for label, n in tqdm(benchmarks, desc="Uncached", unit="idx"):
        uncached_times[label] = time_queries(uncached, n, args.repeats)

    print(f"\n{'='*60}")
    print(f"  Cached  (pre-filled to n={max_index:,})")
    print(f"{'='*60}")
    oracle = PrimeOracle(cfg)
    prefill(oracle, max_index)
    cached_times = {}
    for label, n in benchmarks:
        cached_times[label] = time_queries(oracle, n, args.repeats * 1000)

    print(f"\n  {'benchmark':<12s}  {'index':>12s}  {'uncached':>12s}  {'cached':>12s}")
    print(f"  {'-'*12}  {'-'*12}  {'-'*12}  {'-'*12}")
    for label, n in benchmarks:
        print(f"  {label:<12s}  {n:>12,}  "
              f"{uncached_times[label] * 1e3:>9.3f} ms  "
              f"{cached_times[label] * 1e6:>9.3f} us")

    stats = oracle.stats
    print(f"\n  Cached oracle: {oracle.cache_size:,} primes, "
          f"{stats.segments_sieved} segments, {stats.cache_hits} cache hits")
    print(f"  Total time: {time.time() - total_t0:.1f}s")


if __name__ == "__main__":
    main()
