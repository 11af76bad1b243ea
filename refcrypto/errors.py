"""Exception hierarchy for refcrypto.

All errors derive from ``CryptoError``, itself a ``ValueError``: every failure
in this library is a usage error on the caller's inputs.
"""
from __future__ import annotations

from typing import Optional


class CryptoError(ValueError):
    """Base class for every error raised by refcrypto."""


class LengthMismatchError(CryptoError):
    """Plaintext and ciphertext buffers do not have the same length."""

    def __init__(self, expected: int, actual: int, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Plaintext and ciphertext must have the same length ({expected} != {actual})"
        )


class AlignmentError(CryptoError):
    """Buffer length is not a multiple of the cipher block size."""

    def __init__(self, length: int, block_size: int, message: Optional[str] = None):
        self.length = length
        self.block_size = block_size
        super().__init__(
            message or f"Length of plain/ciphertext ({length}) is not a multiple of block size ({block_size})"
        )


class KeySizeError(CryptoError):
    """Key length differs from the cipher's KEY_SIZE."""

    def __init__(self, expected: int, actual: int, cipher_name: str = ""):
        self.expected = expected
        self.actual = actual
        label = f"{cipher_name} key" if cipher_name else "Key"
        super().__init__(f"{label} must be {expected} bytes, got {actual}")


class BlockSizeError(CryptoError):
    """A single block (or an IV) differs from the cipher's BLOCK_SIZE."""

    def __init__(self, expected: int, actual: int, what: str = "Block"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} must be {expected} bytes, got {actual}")


class HashFinalisedError(CryptoError):
    """update() or finalise() called on a hash that was already finalised."""

    def __init__(self, hash_name: str):
        self.hash_name = hash_name
        super().__init__(f"{hash_name} context already finalised; create a new instance")
