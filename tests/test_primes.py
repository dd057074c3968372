import numpy as np
import sympy

from prime_oracle.primes import primes_up_to, sieve_segment


def test_primes_up_to_below_two_is_empty() -> None:
    for limit in (-5, 0, 1):
        result = primes_up_to(limit)
        assert len(result) == 0
        assert result.dtype == np.int64


def test_primes_up_to_small_limits() -> None:
    assert primes_up_to(2).tolist() == [2]
    assert primes_up_to(3).tolist() == [2, 3]
    assert primes_up_to(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_primes_up_to_matches_sympy() -> None:
    assert primes_up_to(100_000).tolist() == list(sympy.primerange(2, 100_001))


def test_segment_crosses_off_base_primes_themselves() -> None:
    # Base primes inside the window are multiples of themselves.
    found = sieve_segment(2, 30, primes_up_to(6))
    assert found.tolist() == [7, 11, 13, 17, 19, 23, 29]


def test_segment_above_base_primes() -> None:
    found = sieve_segment(10, 30, primes_up_to(6))
    assert found.tolist() == [11, 13, 17, 19, 23, 29]


def test_segment_clears_zero_and_one() -> None:
    assert sieve_segment(0, 10, np.array([2, 3])).tolist() == [5, 7]


def test_segment_single_number_and_empty_window() -> None:
    assert sieve_segment(97, 97, primes_up_to(10)).tolist() == [97]
    assert sieve_segment(98, 98, primes_up_to(10)).tolist() == []
    assert len(sieve_segment(50, 49, primes_up_to(10))) == 0


def test_segment_matches_sympy_far_from_origin() -> None:
    low, high = 1_000_000, 1_010_000
    base = primes_up_to(int(high ** 0.5) + 1)
    expected = list(sympy.primerange(low, high + 1))
    assert sieve_segment(low, high, base).tolist() == expected
