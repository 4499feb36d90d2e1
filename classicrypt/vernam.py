"""Vernam cipher: XOR of a message with a key of the same length."""

from __future__ import annotations


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _xor(data: bytes, key: bytes) -> bytes:
    if len(data) != len(key):
        raise ValueError("Key and plaintext must be the same length.")
    return bytes(d ^ k for d, k in zip(data, key))


def encrypt(plaintext: str | bytes, key: str | bytes) -> bytes:
    """XOR ``plaintext`` with ``key`` and return the cipher bytes."""
    return _xor(_as_bytes(plaintext), _as_bytes(key))


def decrypt(ciphertext: bytes, key: str | bytes) -> str:
    """XOR ``ciphertext`` with ``key`` and return the recovered text."""
    return _xor(bytes(ciphertext), _as_bytes(key)).decode("utf-8")


def to_hex(data: bytes) -> str:
    """Render bytes as space-separated two-digit uppercase hex."""
    return " ".join(f"{byte:02X}" for byte in data)