"""Vigenere cipher over the uppercase letters A to Z."""

from __future__ import annotations

from itertools import cycle


def _check(text: str, what: str) -> None:
    if not all("A" <= ch <= "Z" for ch in text):
        raise ValueError(f"{what} must contain only uppercase letters A-Z")


def _apply(text: str, key: str, sign: int) -> str:
    _check(text, "text")
    _check(key, "key")
    if not key:
        raise ValueError("key must not be empty")
    return "".join(
        chr((ord(p) - ord("A") + sign * (ord(k) - ord("A"))) % 26 + ord("A"))
        for p, k in zip(text, cycle(key))
    )


def encrypt(text: str, key: str) -> str:
    """Encrypt uppercase ``text`` with the repeating uppercase ``key``."""
    return _apply(text, key, 1)


def decrypt(text: str, key: str) -> str:
    """Decrypt uppercase ``text`` with the repeating uppercase ``key``."""
    return _apply(text, key, -1)