"""Playfair digraph cipher with a 5x5 key square that merges J into I."""

from __future__ import annotations

import string

_SIZE = 5
_ALPHABET = string.ascii_lowercase


def _normalise(text: str, what: str) -> str:
    cleaned = text.replace(" ", "").lower()
    if not all(ch in _ALPHABET for ch in cleaned):
        raise ValueError(f"{what} must contain only letters A-Z")
    return cleaned


def key_table(key: str) -> tuple[str, ...]:
    """Return the five rows of the key square built from ``key``.

    The key's letters come first in order of first appearance, then the rest
    of the alphabet. The letter J never appears in the square.
    """
    letters = dict.fromkeys(ch for ch in _normalise(key, "key") if ch != "j")
    letters.update(dict.fromkeys(ch for ch in _ALPHABET if ch != "j"))
    square = "".join(letters)
    return tuple(square[row:row + _SIZE] for row in range(0, len(square), _SIZE))


def prepare(text: str) -> str:
    """Split doubled letters inside a digraph with ``x`` and pad to even length."""
    chars = list(_normalise(text, "text"))
    i = 0
    while i < len(chars):
        if i + 1 < len(chars) and chars[i] == chars[i + 1]:
            chars.insert(i + 1, "x")
        i += 2
    if len(chars) % 2:
        chars.append("x")
    return "".join(chars)


def encrypt(text: str, key: str) -> str:
    """Encrypt ``text`` with the square built from ``key``; the result is uppercase."""
    table = key_table(key)
    positions = {ch: (row, col) for row, line in enumerate(table) for col, ch in enumerate(line)}
    positions["j"] = positions["i"]
    prepared = prepare(text)

    pairs = []
    for first, second in zip(prepared[0::2], prepared[1::2]):
        row_a, col_a = positions[first]
        row_b, col_b = positions[second]
        if row_a == row_b:
            pair = table[row_a][(col_a + 1) % _SIZE] + table[row_b][(col_b + 1) % _SIZE]
        elif col_a == col_b:
            pair = table[(row_a + 1) % _SIZE][col_a] + table[(row_b + 1) % _SIZE][col_b]
        else:
            pair = table[row_a][col_b] + table[row_b][col_a]
        pairs.append(pair)
    return "".join(pairs).upper()