import numpy as np
import pytest

from prime_oracle.cache import PrimeCache


def test_empty_cache() -> None:
    cache = PrimeCache()
    assert len(cache) == 0
    assert cache.last is None
    assert not cache.covers(2)
    assert len(cache.view()) == 0


def test_extend_and_index() -> None:
    cache = PrimeCache()
    assert cache.extend(np.array([2, 3, 5, 7])) == 4
    assert len(cache) == 4
    assert cache[0] == 2
    assert cache[3] == 7
    assert isinstance(cache[3], int)
    assert cache.last == 7


def test_out_of_range_read_raises() -> None:
    cache = PrimeCache()
    cache.extend(np.array([2, 3]))
    with pytest.raises(IndexError):
        cache[2]
    with pytest.raises(IndexError):
        cache[-1]


def test_extend_skips_values_behind_frontier() -> None:
    # Merging an overlapping base-prime run must not duplicate entries.
    cache = PrimeCache()
    cache.extend(np.array([2, 3]))
    assert cache.extend(np.array([2, 3, 5, 7])) == 2
    assert cache.view().tolist() == [2, 3, 5, 7]
    assert cache.extend(np.array([3, 5])) == 0
    assert len(cache) == 4


def test_extend_rejects_unordered_input() -> None:
    cache = PrimeCache()
    with pytest.raises(ValueError):
        cache.extend(np.array([5, 3]))
    assert len(cache) == 0


def test_buffer_grows_by_doubling() -> None:
    cache = PrimeCache(initial_capacity=2)
    cache.extend(np.array([2, 3, 5, 7, 11]))
    assert cache.capacity == 8
    assert cache.view().tolist() == [2, 3, 5, 7, 11]


def test_view_is_read_only() -> None:
    cache = PrimeCache()
    cache.extend(np.array([2, 3, 5]))
    view = cache.view()
    with pytest.raises(ValueError):
        view[0] = 4
    # The cache itself stays writable for later appends.
    cache.extend(np.array([7]))
    assert cache.last == 7


def test_primes_up_to_and_covers() -> None:
    cache = PrimeCache()
    cache.extend(np.array([2, 3, 5, 7, 11, 13]))
    assert cache.primes_up_to(10).tolist() == [2, 3, 5, 7]
    assert cache.primes_up_to(11).tolist() == [2, 3, 5, 7, 11]
    assert cache.primes_up_to(1).tolist() == []
    assert cache.covers(13)
    assert not cache.covers(14)


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        PrimeCache(initial_capacity=0)
