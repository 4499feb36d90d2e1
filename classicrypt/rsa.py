"""Textbook RSA with the smallest valid public exponent."""

from __future__ import annotations

from dataclasses import dataclass

from classicrypt.numtheory import gcd, mod_inverse, power_mod


def _as_int(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("only a single character can be encrypted")
        return ord(value)
    return value


@dataclass(frozen=True)
class KeyPair:
    """Modulus ``n`` with public exponent ``e`` and private exponent ``d``."""

    n: int
    e: int
    d: int

    def encrypt(self, value: int | str) -> int:
        """Encrypt an integer or a single character with the public key."""
        return power_mod(_as_int(value), self.e, self.n)

    def decrypt(self, value: int) -> int:
        """Decrypt an integer with the private key."""
        return power_mod(value, self.d, self.n)


def generate_keys(p: int, q: int) -> KeyPair:
    """Build a key pair from primes ``p`` and ``q``.

    The public exponent is the smallest integer above 1 coprime to the totient.
    """
    n = p * q
    phi = (p - 1) * (q - 1)
    e = next((i for i in range(2, phi) if gcd(phi, i) == 1), None)
    if e is None:
        raise ValueError("no public exponent exists for these primes")
    return KeyPair(n=n, e=e, d=mod_inverse(e, phi))