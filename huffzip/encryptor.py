"""Password-keyed XOR stream cipher with a 32-byte derived key."""

from __future__ import annotations

from itertools import accumulate, cycle
from operator import xor

KEY_SIZE = 32


def derive_key(password: str) -> bytes:
    """Derive a 32-byte key from a non-empty password."""
    raw = password.encode("utf-8")
    if not raw:
        raise ValueError("Password empty!")
    mixed = [(raw[i % len(raw)] ^ (i * 31 + 7)) & 0xFF for i in range(KEY_SIZE)]
    return bytes(accumulate(mixed, xor))


def encrypt(data: bytes, password: str) -> bytes:
    """XOR ``data`` with the key derived from ``password``."""
    if not password:
        raise ValueError("Password empty!")
    key = derive_key(password)
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def decrypt(data: bytes, password: str) -> bytes:
    """Undo :func:`encrypt`; the cipher is its own inverse."""
    return encrypt(data, password)