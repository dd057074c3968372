import warnings

import pytest

from prime_oracle.config import SieveConfig, MIN_EFFICIENT_SEGMENT


def test_defaults() -> None:
    cfg = SieveConfig()
    assert cfg.segment_size == 1_000_000
    assert cfg.bound_margin == 10
    assert cfg.thread_safe is True
    assert SieveConfig.default() == cfg


def test_presets_are_valid() -> None:
    assert SieveConfig.small().segment_size < SieveConfig.default().segment_size
    assert SieveConfig.large().segment_size > SieveConfig.default().segment_size


def test_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        SieveConfig(segment_size=0)
    with pytest.raises(ValueError):
        SieveConfig(bound_margin=-1)


def test_warns_on_tiny_segment() -> None:
    with pytest.warns(UserWarning, match="Segment too small"):
        SieveConfig(segment_size=MIN_EFFICIENT_SEGMENT - 1)


def test_no_warning_at_threshold() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        SieveConfig(segment_size=MIN_EFFICIENT_SEGMENT)


def test_memory_estimates() -> None:
    cfg = SieveConfig()
    assert cfg.segment_memory_mb() == pytest.approx(1_000_000 / (1024 * 1024))
    assert cfg.memory_estimate_mb(0) > 0
    assert cfg.memory_estimate_mb(10_000_000) > cfg.memory_estimate_mb(1_000)
    assert cfg.memory_estimate_mb(10_000_000) > cfg.cache_memory_mb(10_000_000)
