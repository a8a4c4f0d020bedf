"""Shift cipher used to obscure values stored in the record database.

Every character is shifted by a key, modulo 256, and the key itself is
appended as the last character, so the text carries what is needed to
read it back.
"""

import random

_BYTE = 256


def _check_key(key):
    if not 0 <= key < _BYTE:
        raise ValueError(f"key must be in 0..255, got {key}")


def encode(text, key):
    """Shift every character of ``text`` by ``key`` and append the key."""
    _check_key(key)
    shifted = []
    for ch in text:
        code = ord(ch)
        if code >= _BYTE:
            raise ValueError(f"character {ch!r} is outside the single-byte range")
        shifted.append(chr((code + key) % _BYTE))
    return "".join(shifted) + chr(key)


def decode(text):
    """Undo :func:`encode`, reading the key from the last character."""
    if not text:
        raise ValueError("cannot decode an empty string")
    key = ord(text[-1])
    _check_key(key)
    body = text[:-1]
    if any(ord(ch) >= _BYTE for ch in body):
        raise ValueError("encoded text holds a character outside the single-byte range")
    return "".join(chr((ord(ch) - key) % _BYTE) for ch in body)


def random_key(low, span, rng=None):
    """Pick a key in ``low`` .. ``low + span - 1``."""
    if span <= 0:
        raise ValueError("span must be positive")
    rng = rng if rng is not None else random
    return rng.randrange(span) + low