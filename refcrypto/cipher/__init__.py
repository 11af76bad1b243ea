"""Block ciphers.

Currently implemented:
- DES / Triple-DES 2K / Triple-DES 3K
- AES128 / AES192 / AES256

Each cipher exposes ``cipher`` and ``decipher`` to treat a single block
(see ``BlockCipher``).
"""
from .aes import AES128, AES192, AES256
from .base import BlockCipher
from .des import DES, derive_round_keys
from .registry import CipherRegistry
from .triple_des import TripleDES2K, TripleDES3K

__all__ = [
    "AES128",
    "AES192",
    "AES256",
    "BlockCipher",
    "CipherRegistry",
    "DES",
    "TripleDES2K",
    "TripleDES3K",
    "derive_round_keys",
]
