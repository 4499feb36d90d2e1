"""Bitwise operator demonstrations on 32-bit integers and characters."""

from __future__ import annotations

from typing import NamedTuple


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def bitwise_operations(a: int, b: int) -> dict[str, int]:
    """Return AND, OR, XOR, NOT and one-bit shifts of ``a`` and ``b`` as 32-bit signed values."""
    results = {
        "a & b": a & b,
        "a | b": a | b,
        "a ^ b": a ^ b,
        "~a": ~a,
        "~b": ~b,
        "a << 1": a << 1,
        "b << 1": b << 1,
        "a >> 1": a >> 1,
        "b >> 1": b >> 1,
    }
    return {label: _int32(value) for label, value in results.items()}


class MaskRow(NamedTuple):
    """One character together with its code masked by AND, OR and XOR."""

    char: str
    code: int
    masked_and: int
    masked_or: int
    masked_xor: int


def mask_table(text: str, mask: int = 127) -> list[MaskRow]:
    """Return one row per character of ``text`` with its code combined with ``mask``."""
    return [
        MaskRow(ch, ord(ch), ord(ch) & mask, ord(ch) | mask, ord(ch) ^ mask) for ch in text
    ]


def format_mask_table(text: str) -> str:
    """Render the table of ``text`` masked with 127 as tab-separated lines."""
    lines = [
        "Original\tAND\tOR\tXOR",
        "Char\tASCII\t127\t127\t127",
        "-----\t-----\t---\t---\t---",
    ]
    lines.extend("\t".join(str(field) for field in row) for row in mask_table(text, 127))
    return "\n".join(lines) + "\n"