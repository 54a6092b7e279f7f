"""Colour generators: uniform random and content hash.

random_colour() draws each channel from a numpy Generator. Pass a seeded
generator (np.random.default_rng(42)) for reproducible output; without one
the process-wide generator, seeded from the OS, is used.

hash_colour() is deterministic across processes and releases: it hashes the
UTF-8 bytes with an 8-byte BLAKE2b digest. Python's builtin hash() is salted
per process and is not used.
"""

import hashlib

import numpy as np

from toggle_florp.core.types import Color

_default_rng = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Return the shared generator used when no rng is supplied."""
    return _default_rng


def random_colour(rng: np.random.Generator | None = None) -> Color:
    if rng is None:
        rng = _default_rng
    r, g, b = rng.integers(0, 256, size=3)
    return Color(int(r), int(g), int(b))


def text_hash(text: str) -> int:
    """64-bit hash of the UTF-8 bytes of text."""
    h = hashlib.blake2b(text.encode('utf-8'), digest_size=8)
    return int.from_bytes(h.digest(), 'little')


def hash_colour(text: str) -> Color:
    """Derive a colour from the low 32 bits of text_hash(text).

    Bits 24-31 are red, 16-23 green, 8-15 blue. Bits 0-7 are reserved for
    alpha and dropped.
    """
    value = text_hash(text) & 0xFFFFFFFF
    r = (value >> 24) & 0xFF
    g = (value >> 16) & 0xFF
    b = (value >> 8) & 0xFF
    _a = value & 0xFF  # unused, kept for a future alpha channel
    return Color(r, g, b)
