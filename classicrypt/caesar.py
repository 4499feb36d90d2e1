"""Caesar shift cipher."""

from __future__ import annotations

from typing import NamedTuple


def _shift(ch: str, base: str, key: int) -> str:
    return chr((ord(ch) - ord(base) + key) % 26 + ord(base))


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def encrypt(text: str, key: int) -> str:
    """Shift the uppercase letters of ``text`` forward by ``key``; leave the rest."""
    return "".join(_shift(ch, "A", key) if _is_upper(ch) else ch for ch in text)


def decrypt(text: str, key: int) -> str:
    """Shift the uppercase letters of ``text`` back by ``key``; leave the rest."""
    return "".join(_shift(ch, "A", -key) if _is_upper(ch) else ch for ch in text)


def shift_letters(text: str, key: int) -> str:
    """Shift both uppercase and lowercase letters forward by ``key``."""
    def convert(ch: str) -> str:
        if _is_upper(ch):
            return _shift(ch, "A", key)
        if _is_lower(ch):
            return _shift(ch, "a", key)
        return ch

    return "".join(convert(ch) for ch in text)


class AsciiRow(NamedTuple):
    """A character before and after the shift, with their codes."""

    original: str
    original_code: int
    encrypted: str
    encrypted_code: int


def ascii_table(text: str, key: int) -> list[AsciiRow]:
    """Return one row per character of ``text`` showing its shifted form."""
    return [
        AsciiRow(ch, ord(ch), shifted, ord(shifted))
        for ch, shifted in zip(text, shift_letters(text, key))
    ]