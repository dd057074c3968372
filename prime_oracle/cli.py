"""
Command-line interface for the Prime Oracle.

Usage:
    python -m prime_oracle nth 19 99 1000000
    python -m prime_oracle first 25 --csv
    python -m prime_oracle validate --max-index 100000
    python -m prime_oracle info --index 10000000
"""

import sys
import time
import logging
import click

from .config import SieveConfig
from .engine import PrimeOracle, PrimeOracleError
from .invariants import run_all_invariants
from .display import (
    format_invariant_report,
    format_answers,
    format_primes,
    format_stats,
    format_config,
)


def _build_config(preset, segment_size) -> SieveConfig:
    """Build SieveConfig from CLI options."""
    if preset == "small":
        cfg = SieveConfig.small()
    elif preset == "large":
        cfg = SieveConfig.large()
    else:
        cfg = SieveConfig.default()

    # Override with explicit options if given
    if segment_size is not None:
        cfg = SieveConfig(
            segment_size=segment_size,
            bound_margin=cfg.bound_margin,
            thread_safe=cfg.thread_safe,
        )

    return cfg


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            stream=sys.stderr,
        )


def _common_options(f):
    f = click.option("--verbose", "-v", is_flag=True,
                     help="Log sieve progress to stderr.")(f)
    f = click.option("--segment-size", type=int, default=None,
                     help="Segment width W.")(f)
    f = click.option("--preset", type=click.Choice(["small", "default", "large"]),
                     default="default", help="Configuration preset.")(f)
    return f


@click.group()
def main():
    """Prime Oracle -- n-th prime via a cached segmented sieve."""
    pass


@main.command()
@click.argument("indices", type=int, nargs=-1, required=True)
@click.option("--stats/--no-stats", default=False,
              help="Print sieve work counters after the answers.")
@_common_options
def nth(indices, stats, preset, segment_size, verbose):
    """Print the n-th prime (0-indexed) for each INDEX."""
    _setup_logging(verbose)
    oracle = PrimeOracle(_build_config(preset, segment_size))

    t0 = time.time()
    answers = {}
    try:
        for n in indices:
            answers[n] = oracle.nth_prime(n)
    except PrimeOracleError as e:
        if answers:
            click.echo(format_answers(answers))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - t0
    click.echo(format_answers(answers))
    if stats:
        click.echo("")
        click.echo(format_stats(oracle.stats, oracle.cache_size))
        click.echo(f"\nCompleted in {elapsed:.2f}s")


@main.command()
@click.argument("count", type=int)
@click.option("--csv", is_flag=True, help="Comma-separated output.")
@_common_options
def first(count, csv, preset, segment_size, verbose):
    """Print the first COUNT primes."""
    _setup_logging(verbose)
    oracle = PrimeOracle(_build_config(preset, segment_size))
    try:
        primes = oracle.first_primes(count)
    except PrimeOracleError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if primes:
        click.echo(format_primes(primes, csv=csv))


@main.command()
@click.option("--max-index", type=int, default=2000,
              help="Largest reference index to check.")
@_common_options
def validate(max_index, preset, segment_size, verbose):
    """Run all invariant checks."""
    _setup_logging(verbose)
    cfg = _build_config(preset, segment_size)
    click.echo(f"Configuration: W={cfg.segment_size}, margin={cfg.bound_margin}, "
               f"max_index={max_index}")
    click.echo("Running invariant checks...\n")

    t0 = time.time()
    try:
        results = run_all_invariants(PrimeOracle(cfg), max_index=max_index)
    except PrimeOracleError as e:
        click.echo(f"\nFATAL: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - t0
    click.echo(format_invariant_report(results))
    click.echo(f"\nCompleted in {elapsed:.1f}s")

    if not all(r.passed for r in results):
        sys.exit(1)


@main.command()
@click.option("--index", "-n", type=int, default=1_000_000,
              help="Index to size the estimates for.")
@click.option("--preset", type=click.Choice(["small", "default", "large"]),
              default="default", help="Configuration preset.")
@click.option("--segment-size", type=int, default=None, help="Segment width W.")
def info(index, preset, segment_size):
    """Show configuration and resource estimates."""
    cfg = _build_config(preset, segment_size)
    click.echo(format_config(cfg, index))
