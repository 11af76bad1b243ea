"""MD4 message digest (RFC 1320)."""
from __future__ import annotations

import struct
from typing import List

from .base import Hash

MASK32 = 0xFFFFFFFF

# (message word index, shift) per step
ROUND1 = [(k, (3, 7, 11, 19)[k % 4]) for k in range(16)]
ROUND2 = [((k % 4) * 4 + k // 4, (3, 5, 9, 13)[k % 4]) for k in range(16)]
ROUND3 = [(idx, (3, 9, 11, 15)[n % 4]) for n, idx in enumerate((0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15))]


def _rotl(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


def _f(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | (x & z) | (y & z)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


class MD4(Hash):
    NAME = "MD4"
    DIGEST_SIZE = 16
    BLOCK_SIZE = 64

    def __init__(self):
        super().__init__()
        self._state = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
        self._msg_length = 0  # in bytes

    def _on_update(self, length: int) -> None:
        self._msg_length += length

    def _process_block(self, block: bytes) -> None:
        x = struct.unpack("<16I", block)
        a, b, c, d = self._state
        rounds: List[tuple] = [
            (_f, 0, ROUND1),
            (_g, 0x5A827999, ROUND2),
            (_h, 0x6ED9EBA1, ROUND3),
        ]
        for func, const, steps in rounds:
            for k, s in steps:
                a = _rotl(a + func(b, c, d) + x[k] + const, s)
                # rotate registers: a, b, c, d -> d, a, b, c
                a, b, c, d = d, a, b, c
        self._state = [(v + w) & MASK32 for v, w in zip(self._state, (a, b, c, d))]

    def _finalise(self, remaining: bytes) -> bytes:
        bit_length = (self._msg_length * 8) & 0xFFFFFFFFFFFFFFFF
        pad_len = (55 - len(remaining)) % 64
        tail = remaining + b"\x80" + b"\x00" * pad_len + struct.pack("<Q", bit_length)
        for i in range(0, len(tail), 64):
            self._process_block(tail[i:i + 64])
        return struct.pack("<4I", *self._state)
