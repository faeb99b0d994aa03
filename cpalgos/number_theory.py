"""Number-theoretic helpers."""

from __future__ import annotations


def odd_power_signature(num: int) -> int:
    """Product of the primes that divide ``num`` to an odd power.

    Two numbers share a signature exactly when their product is a perfect square.
    """
    if num < 1:
        raise ValueError("num must be a positive integer")
    signature = 1
    p = 2
    while p * p <= num:
        if num % p == 0:
            exponent = 0
            while num % p == 0:
                num //= p
                exponent += 1
            if exponent % 2 == 1:
                signature *= p
        p += 1
    if num > 1:
        signature *= num
    return signature