import math

import pytest

from cpalgos.number_theory import odd_power_signature


@pytest.mark.parametrize("root", [1, 2, 3, 6, 10, 35])
def test_perfect_square_has_trivial_signature(root):
    assert odd_power_signature(root * root) == 1


@pytest.mark.parametrize("prime", [2, 7, 97, 7919])
def test_prime_is_its_own_signature(prime):
    assert odd_power_signature(prime) == prime


def test_squarefree_is_its_own_signature():
    assert odd_power_signature(2 * 3 * 5 * 7) == 2 * 3 * 5 * 7


def test_mixed_exponents():
    assert odd_power_signature(12) == 3


@pytest.mark.parametrize("n", [12, 18, 50, 72, 99, 360])
@pytest.mark.parametrize("m", [2, 3, 5])
def test_multiplying_by_square_keeps_signature(n, m):
    assert odd_power_signature(n * m * m) == odd_power_signature(n)


@pytest.mark.parametrize("n", range(1, 200))
def test_signature_divides_and_leaves_square(n):
    sig = odd_power_signature(n)
    assert n % sig == 0
    quotient = n // sig
    assert math.isqrt(quotient) ** 2 == quotient


@pytest.mark.parametrize("n", range(2, 120))
def test_signature_is_fixed_point(n):
    sig = odd_power_signature(n)
    assert odd_power_signature(sig) == sig


@pytest.mark.parametrize(
    "n, expected",
    [(8, 2), (18, 2), (45, 5), (75, 3), (60, 15), (1, 1)],
)
def test_pinned_signatures(n, expected):
    assert odd_power_signature(n) == expected


@pytest.mark.parametrize("bad", [0, -4])
def test_non_positive_rejected(bad):
    with pytest.raises(ValueError):
        odd_power_signature(bad)