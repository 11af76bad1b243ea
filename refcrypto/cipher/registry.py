from __future__ import annotations

from typing import Dict, List, Type

from .aes import AES128, AES192, AES256
from .base import BlockCipher
from .des import DES
from .triple_des import TripleDES2K, TripleDES3K


def builtin_ciphers() -> Dict[str, Type[BlockCipher]]:
    return {
        "des": DES,
        "3des-2k": TripleDES2K,
        "3des-3k": TripleDES3K,
        "aes128": AES128,
        "aes192": AES192,
        "aes256": AES256,
    }


class CipherRegistry:
    """Name -> BlockCipher class lookup."""

    def __init__(self):
        self._ciphers: Dict[str, Type[BlockCipher]] = builtin_ciphers()

    def get(self, name: str) -> Type[BlockCipher]:
        key = name.lower()
        if key not in self._ciphers:
            raise KeyError(f"Unknown cipher: {name}")
        return self._ciphers[key]

    def create(self, name: str) -> BlockCipher:
        return self.get(name)()

    def list_names(self) -> List[str]:
        return sorted(self._ciphers.keys())

    def exists(self, name: str) -> bool:
        return name.lower() in self._ciphers

    def register(self, name: str, cipher_cls: Type[BlockCipher]) -> None:
        """Register a custom cipher class under ``name``."""
        self._ciphers[name.lower()] = cipher_cls
