"""Triple-DES (EDE) with two or three independent 8-byte DES keys."""
from __future__ import annotations

from typing import Optional

from refcrypto.utils.bytes_ops import extract_block

from .base import BlockCipher
from .des import DES


class _TripleDES(BlockCipher):
    BLOCK_SIZE = 8

    def __init__(self, des: Optional[DES] = None):
        self.des = des or DES()

    def _subkeys(self, key: bytes):  # pragma: no cover
        raise NotImplementedError

    def encrypt_block(self, plaintext_block: bytes, key: bytes) -> bytes:
        k1, k2, k3 = self._subkeys(key)
        tmp = self.des.encrypt_block(plaintext_block, k1)
        tmp = self.des.decrypt_block(tmp, k2)
        return self.des.encrypt_block(tmp, k3)

    def decrypt_block(self, ciphertext_block: bytes, key: bytes) -> bytes:
        k1, k2, k3 = self._subkeys(key)
        tmp = self.des.decrypt_block(ciphertext_block, k3)
        tmp = self.des.encrypt_block(tmp, k2)
        return self.des.decrypt_block(tmp, k1)


class TripleDES2K(_TripleDES):
    """Two-key Triple-DES: key = K1 || K2, the last stage reuses K1."""

    NAME = "3DES-2K"
    KEY_SIZE = 16

    def _subkeys(self, key: bytes):
        k1 = extract_block(key, 0, 8)
        k2 = extract_block(key, 8, 8)
        return k1, k2, k1


class TripleDES3K(_TripleDES):
    """Three-key Triple-DES: key = K1 || K2 || K3."""

    NAME = "3DES-3K"
    KEY_SIZE = 24

    def _subkeys(self, key: bytes):
        return extract_block(key, 0, 8), extract_block(key, 8, 8), extract_block(key, 16, 8)
