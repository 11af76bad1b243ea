"""Byte and bit helpers shared by the block ciphers and chaining modes."""
from __future__ import annotations

from typing import List, Sequence, Union

from refcrypto.errors import AlignmentError, LengthMismatchError

BytesLike = Union[bytes, bytearray, memoryview]


def xor_bytes(a: BytesLike, b: BytesLike) -> bytes:
    """XOR two byte strings of equal length."""
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b), "xor_bytes length mismatch")
    return bytes(x ^ y for x, y in zip(a, b))


def extract_block(data: BytesLike, start: int, length: int) -> bytes:
    """Return ``data[start:start + length]``, refusing to return a short block."""
    if start < 0 or start + length > len(data):
        raise AlignmentError(
            len(data),
            length,
            f"Cannot extract {length} bytes at offset {start} from {len(data)}-byte buffer",
        )
    return bytes(data[start:start + length])


def split_blocks(data: BytesLike, block_size: int) -> List[bytes]:
    if len(data) % block_size != 0:
        raise AlignmentError(len(data), block_size)
    return [bytes(data[i:i + block_size]) for i in range(0, len(data), block_size)]


def check_cipher_params(plaintext: BytesLike, ciphertext: BytesLike, block_size: int) -> None:
    """Validate a plaintext/ciphertext buffer pair before any block is processed.

    Raises:
        LengthMismatchError: If the two buffers differ in length.
        AlignmentError: If the shared length is not a multiple of ``block_size``.
    """
    if len(plaintext) != len(ciphertext):
        raise LengthMismatchError(len(plaintext), len(ciphertext))
    if len(plaintext) % block_size != 0:
        raise AlignmentError(len(plaintext), block_size)


def bytes_to_bits(data: BytesLike) -> List[int]:
    """Expand bytes into a list of bits, MSB of byte 0 first."""
    bits: List[int] = []
    for byte in data:
        for i in range(8):
            bits.append((byte >> (7 - i)) & 1)
    return bits


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack a bit list (length a multiple of 8) back into bytes, MSB first."""
    if len(bits) % 8 != 0:
        raise AlignmentError(len(bits), 8, "bit count must be a multiple of 8")
    result = bytearray(len(bits) // 8)
    for i, bit in enumerate(bits):
        result[i // 8] |= bit << (7 - (i % 8))
    return bytes(result)


def permute_bits(bits: Sequence[int], table: Sequence[int]) -> List[int]:
    """Select ``bits`` through a 1-based permutation/selection table."""
    return [bits[p - 1] for p in table]
