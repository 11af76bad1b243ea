"""DES (FIPS 46-3).

Bits are numbered 1..64 from the most significant bit of byte 0; every table
below uses that numbering.

Reference implementation only. Not hardened against side channels.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, List, Optional, Sequence, Tuple

from refcrypto.config import load_settings
from refcrypto.utils.bytes_ops import bits_to_bytes, bytes_to_bits, permute_bits

from .base import BlockCipher

logger = logging.getLogger(__name__)

RoundKeys = Tuple[Tuple[int, ...], ...]


# ============================================================================
# TABLES
# ============================================================================

IP: Tuple[int, ...] = (
    58, 50, 42, 34, 26, 18, 10, 2, 60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6, 64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1, 59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5, 63, 55, 47, 39, 31, 23, 15, 7,
)

IP_INV: Tuple[int, ...] = (
    40, 8, 48, 16, 56, 24, 64, 32, 39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30, 37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28, 35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26, 33, 1, 41, 9, 49, 17, 57, 25,
)

# Expansion 32 -> 48
E: Tuple[int, ...] = (
    32, 1, 2, 3, 4, 5,
    4, 5, 6, 7, 8, 9,
    8, 9, 10, 11, 12, 13,
    12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21,
    20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29,
    28, 29, 30, 31, 32, 1,
)

P: Tuple[int, ...] = (
    16, 7, 20, 21, 29, 12, 28, 17,
    1, 15, 23, 26, 5, 18, 31, 10,
    2, 8, 24, 14, 32, 27, 3, 9,
    19, 13, 30, 6, 22, 11, 4, 25,
)

# Permuted Choice 1: 64 -> 56, parity bits dropped
PC1: Tuple[int, ...] = (
    57, 49, 41, 33, 25, 17, 9, 1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27, 19, 11, 3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15, 7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29, 21, 13, 5, 28, 20, 12, 4,
)

# Permuted Choice 2: 56 -> 48
PC2: Tuple[int, ...] = (
    14, 17, 11, 24, 1, 5, 3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8, 16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55, 30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53, 46, 42, 50, 36, 29, 32,
)

LEFT_SHIFTS: Tuple[int, ...] = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)

# S1..S8, each 4 rows x 16 columns of 4-bit outputs
SBOXES: Tuple[Tuple[Tuple[int, ...], ...], ...] = (
    # S1
    ((14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
     (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
     (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
     (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13)),
    # S2
    ((15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10),
     (3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5),
     (0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15),
     (13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9)),
    # S3
    ((10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8),
     (13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1),
     (13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7),
     (1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12)),
    # S4
    ((7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15),
     (13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9),
     (10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4),
     (3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14)),
    # S5
    ((2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9),
     (14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6),
     (4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14),
     (11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3)),
    # S6
    ((12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11),
     (10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8),
     (9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6),
     (4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13)),
    # S7
    ((4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1),
     (13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6),
     (1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2),
     (6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12)),
    # S8
    ((13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7),
     (1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2),
     (7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8),
     (2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11)),
)


# ============================================================================
# KEY SCHEDULE
# ============================================================================

def derive_round_keys(key: bytes) -> RoundKeys:
    """Derive the 16 48-bit DES subkeys K1..K16 (as bit tuples) from an 8-byte key."""
    cd = permute_bits(bytes_to_bits(key), PC1)
    c, d = cd[:28], cd[28:]

    round_keys = []
    for shift in LEFT_SHIFTS:
        c = c[shift:] + c[:shift]
        d = d[shift:] + d[:shift]
        round_keys.append(tuple(permute_bits(c + d, PC2)))
    return tuple(round_keys)


# ============================================================================
# ROUND FUNCTION
# ============================================================================

def sbox_substitute(bits48: Sequence[int]) -> List[int]:
    """Eight 6-bit groups -> eight 4-bit S-box outputs (32 bits)."""
    out: List[int] = []
    for i in range(8):
        g = bits48[6 * i:6 * i + 6]
        row = (g[0] << 1) | g[5]
        col = (g[1] << 3) | (g[2] << 2) | (g[3] << 1) | g[4]
        val = SBOXES[i][row][col]
        out.extend((val >> (3 - j)) & 1 for j in range(4))
    return out


def feistel(right: Sequence[int], subkey: Sequence[int]) -> List[int]:
    """DES round function F(R, K)."""
    expanded = permute_bits(right, E)
    mixed = [a ^ b for a, b in zip(expanded, subkey)]
    return permute_bits(sbox_substitute(mixed), P)


def des_block(block: bytes, round_keys: Sequence[Sequence[int]]) -> bytes:
    """Run the 16-round Feistel network with ``round_keys`` in the given order."""
    bits = permute_bits(bytes_to_bits(block), IP)
    left, right = bits[:32], bits[32:]
    for subkey in round_keys:
        f_out = feistel(right, subkey)
        left, right = right, [a ^ b for a, b in zip(left, f_out)]
    # R16 || L16
    return bits_to_bytes(permute_bits(right + left, IP_INV))


class DES(BlockCipher):
    """DES block cipher: 8-byte key (parity bits ignored), 8-byte block.

    The key schedule is a pure function of the key. With
    ``cache_key_schedule`` enabled, schedules are memoised in a bounded LRU
    owned by this instance; the output bytes are the same either way.
    """

    NAME = "DES"
    KEY_SIZE = 8
    BLOCK_SIZE = 8

    def __init__(self, cache_key_schedule: Optional[bool] = None, cache_size: Optional[int] = None):
        settings = load_settings()
        if cache_key_schedule is None:
            cache_key_schedule = settings.cache_key_schedule
        self.cache_key_schedule = cache_key_schedule
        self._derive: Callable[[bytes], RoundKeys] = derive_round_keys
        if cache_key_schedule:
            self._derive = lru_cache(maxsize=cache_size or settings.key_schedule_cache_size)(derive_round_keys)
        logger.debug("DES ready (cache_key_schedule=%s)", cache_key_schedule)

    def round_keys(self, key: bytes) -> RoundKeys:
        self.check_key(key)
        return self._schedule(key)

    def _schedule(self, key: bytes) -> RoundKeys:
        # lru_cache keys must be hashable
        return self._derive(bytes(key))

    def encrypt_block(self, plaintext_block: bytes, key: bytes) -> bytes:
        return des_block(plaintext_block, self._schedule(key))

    def decrypt_block(self, ciphertext_block: bytes, key: bytes) -> bytes:
        # Same schedule, K16..K1
        return des_block(ciphertext_block, self._schedule(key)[::-1])
