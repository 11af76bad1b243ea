"""Reference implementations of DES, Triple-DES and AES, ECB/CBC chaining
modes and MD2/MD4 hashes.

Reference / education only. Not hardened against side channels.
"""
from .config import Settings, configure_logging, load_settings
from .errors import (
    AlignmentError,
    BlockSizeError,
    CryptoError,
    HashFinalisedError,
    KeySizeError,
    LengthMismatchError,
)
from .cipher import AES128, AES192, AES256, DES, BlockCipher, CipherRegistry, TripleDES2K, TripleDES3K
from .hash import MD2, MD4, Hash
from .modes import CBC, ECB, ChainingMode, ChainingModeWithIV

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "configure_logging",
    "load_settings",
    "AlignmentError",
    "BlockSizeError",
    "CryptoError",
    "HashFinalisedError",
    "KeySizeError",
    "LengthMismatchError",
    "AES128",
    "AES192",
    "AES256",
    "DES",
    "BlockCipher",
    "CipherRegistry",
    "TripleDES2K",
    "TripleDES3K",
    "MD2",
    "MD4",
    "Hash",
    "CBC",
    "ECB",
    "ChainingMode",
    "ChainingModeWithIV",
]
