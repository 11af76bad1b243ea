"""Chaining modes over any ``BlockCipher``.

Example:
    >>> from refcrypto.cipher import AES128
    >>> from refcrypto.modes import CBC
    >>> key = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
    >>> iv = bytes(range(16))
    >>> ct = CBC(iv).cipher(AES128(), bytes.fromhex("6bc1bee22e409f96e93d7e117393172a"), key)
    >>> ct.hex()
    '7649abac8119b246cee98e9b12e9197d'
"""
from .base import ChainingMode, ChainingModeWithIV
from .cbc import CBC
from .ecb import ECB

__all__ = ["CBC", "ChainingMode", "ChainingModeWithIV", "ECB"]
