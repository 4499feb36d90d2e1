"""Rail fence transposition cipher."""

from __future__ import annotations

from itertools import cycle, islice


def rail_pattern(length: int, depth: int) -> list[int]:
    """Return the rail each of ``length`` positions falls on in a zigzag of ``depth`` rails."""
    if depth < 1:
        raise ValueError("depth must be at least 1")
    if length < 0:
        raise ValueError("length must not be negative")
    zigzag = list(range(depth)) + list(range(depth - 2, 0, -1))
    return list(islice(cycle(zigzag), length))


def encrypt(text: str, depth: int) -> str:
    """Write ``text`` along the zigzag and read the rails top to bottom."""
    pattern = rail_pattern(len(text), depth)
    ordered = sorted(zip(pattern, text), key=lambda pair: pair[0])
    return "".join(ch for _, ch in ordered)


def decrypt(ciphertext: str, depth: int) -> str:
    """Undo :func:`encrypt` for the same ``depth``."""
    pattern = rail_pattern(len(ciphertext), depth)
    positions = sorted(range(len(ciphertext)), key=pattern.__getitem__)
    result = [""] * len(ciphertext)
    for position, ch in zip(positions, ciphertext):
        result[position] = ch
    return "".join(result)