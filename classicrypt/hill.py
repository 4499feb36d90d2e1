"""Hill cipher on one block of three letters with a fixed key matrix."""

from __future__ import annotations

KEY_MATRIX = ((17, 17, 5), (21, 18, 21), (2, 2, 19))
INVERSE_MATRIX = ((4, 9, 15), (15, 17, 6), (24, 0, 17))
BLOCK = 3


def letter_values(text: str) -> list[int]:
    """Return the values 0-25 of the first three letters of ``text``."""
    block = text[:BLOCK]
    if len(block) < BLOCK:
        raise ValueError("text must have at least three letters")
    if not all("A" <= ch <= "Z" for ch in block):
        raise ValueError("text must contain only uppercase letters A-Z")
    return [ord(ch) - ord("A") for ch in block]


def _apply(matrix: tuple[tuple[int, ...], ...], text: str) -> str:
    values = letter_values(text)
    return "".join(
        chr(sum(m * v for m, v in zip(row, values)) % 26 + ord("A")) for row in matrix
    )


def encrypt(text: str) -> str:
    """Encrypt the first three letters of ``text``."""
    return _apply(KEY_MATRIX, text)


def decrypt(text: str) -> str:
    """Decrypt the first three letters of ``text``."""
    return _apply(INVERSE_MATRIX, text)