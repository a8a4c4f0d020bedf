"""MD5 checksum of byte strings, text and files."""

import os
import struct

from .md5tables import BLOCK_SIZE, INIT_STATE, SHIFTS, T, WORD_ORDER, padding

_MASK32 = 0xFFFFFFFF
_CHUNK = 1024


def _rotate_left(x, n):
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _f(b, c, d):
    return (b & c) | (~b & d)


def _g(b, c, d):
    return (b & d) | (c & ~d)


def _h(b, c, d):
    return b ^ c ^ d


def _i(b, c, d):
    return c ^ (b | (~d & _MASK32))


_ROUND_FUNCTIONS = (_f, _g, _h, _i)


def _transform(state, block):
    """Merge one 64-byte block into ``state`` and return the new state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step in range(64):
        round_no, pos = divmod(step, 16)
        func = _ROUND_FUNCTIONS[round_no]
        x = words[WORD_ORDER[round_no][pos]]
        shift = SHIFTS[round_no][pos % 4]
        value = (a + (func(b, c, d) & _MASK32) + x + T[step]) & _MASK32
        a, b, c, d = d, (b + _rotate_left(value, shift)) & _MASK32, b, c
    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d)))


def _as_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


class MD5Checksum:
    """Incremental MD5 checksum; feed data with :meth:`update`."""

    def __init__(self):
        self._state = INIT_STATE
        self._pending = b""
        self._length = 0

    def update(self, data):
        """Add ``data`` (bytes-like, or text taken as UTF-8) to the checksum."""
        data = _as_bytes(data)
        self._length += len(data)
        buffered = self._pending + data
        full = len(buffered) - len(buffered) % BLOCK_SIZE
        state = self._state
        for start in range(0, full, BLOCK_SIZE):
            state = _transform(state, buffered[start:start + BLOCK_SIZE])
        self._state = state
        self._pending = buffered[full:]
        return self

    def hexdigest(self):
        """Return the checksum so far as 32 lower-case hex digits."""
        tail = self._pending + padding(self._length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _transform(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *state).hex()


def md5_of_string(text):
    """Return the hex MD5 checksum of ``text``."""
    return MD5Checksum().update(text).hexdigest()


def md5_of_file(path):
    """Return the hex MD5 checksum of the file at ``path``."""
    checksum = MD5Checksum()
    with open(os.fspath(path), "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK), b""):
            checksum.update(chunk)
    return checksum.hexdigest()