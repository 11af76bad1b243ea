from __future__ import annotations

from typing import Union

from refcrypto.errors import BlockSizeError, KeySizeError

BytesLike = Union[bytes, bytearray, memoryview]


class BlockCipher:
    """Single-block cipher.

    Each block cipher has a ``KEY_SIZE`` and a ``BLOCK_SIZE``, both in bytes.
    ``cipher`` and ``decipher`` treat exactly one block; chaining over longer
    buffers is the job of ``refcrypto.modes``.
    """

    NAME: str = ""
    KEY_SIZE: int = 0
    BLOCK_SIZE: int = 0

    def cipher(self, block: BytesLike, key: BytesLike) -> bytes:
        self.check_block(block)
        self.check_key(key)
        return self.encrypt_block(bytes(block), bytes(key))

    def decipher(self, block: BytesLike, key: BytesLike) -> bytes:
        self.check_block(block)
        self.check_key(key)
        return self.decrypt_block(bytes(block), bytes(key))

    def encrypt_block(self, plaintext_block: bytes, key: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError

    def decrypt_block(self, ciphertext_block: bytes, key: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError

    @classmethod
    def check_key(cls, key: BytesLike) -> None:
        if len(key) != cls.KEY_SIZE:
            raise KeySizeError(cls.KEY_SIZE, len(key), cls.NAME)

    @classmethod
    def check_block(cls, block: BytesLike, what: str = "Block") -> None:
        if len(block) != cls.BLOCK_SIZE:
            raise BlockSizeError(cls.BLOCK_SIZE, len(block), what)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_size={self.KEY_SIZE}, block_size={self.BLOCK_SIZE})"
