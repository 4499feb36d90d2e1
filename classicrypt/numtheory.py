"""Integer helpers: greatest common divisor, modular inverse and fast exponentiation."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    if b > a:
        a, b = b, a
    while b:
        a, b = b, a % b
    return a


def mod_inverse(a: int, m: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo ``m``.

    Raises ``ValueError`` when ``m`` is not positive or when no inverse exists.
    """
    if m <= 0:
        raise ValueError("modulus must be positive")
    r0, r1 = m, a % m
    t0, t1 = 0, 1
    while r1:
        quotient = r0 // r1
        r0, r1 = r1, r0 - quotient * r1
        t0, t1 = t1, t0 - quotient * t1
    if r0 != 1:
        raise ValueError("Inverse doesn't exist")
    return t0 % m


def power_mod(base: int, exp: int, mod: int) -> int:
    """Return ``base ** exp % mod`` by square-and-multiply."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= mod
    while exp > 0:
        if exp % 2 == 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp //= 2
    return result