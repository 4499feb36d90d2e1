"""Diffie-Hellman key exchange over a prime modulus."""

from __future__ import annotations

from dataclasses import dataclass

from classicrypt.numtheory import power_mod


@dataclass(frozen=True)
class KeyExchange:
    """Everything computed during one exchange between parties A and B."""

    q: int
    alpha: int
    x_a: int
    x_b: int
    y_a: int
    y_b: int
    k_a: int
    k_b: int

    @property
    def successful(self) -> bool:
        """True when both parties derived the same key."""
        return self.k_a == self.k_b

    @property
    def shared_key(self) -> int:
        """The key derived by party A."""
        return self.k_a


def public_key(q: int, alpha: int, secret: int) -> int:
    """Return the public value ``alpha ** secret mod q``."""
    return power_mod(alpha, secret, q)


def exchange(q: int, alpha: int, x_a: int, x_b: int) -> KeyExchange:
    """Run the exchange for private values ``x_a`` and ``x_b``."""
    y_a = public_key(q, alpha, x_a)
    y_b = public_key(q, alpha, x_b)
    return KeyExchange(
        q=q,
        alpha=alpha,
        x_a=x_a,
        x_b=x_b,
        y_a=y_a,
        y_b=y_b,
        k_a=power_mod(y_b, x_a, q),
        k_b=power_mod(y_a, x_b, q),
    )