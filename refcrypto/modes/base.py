"""Shared code between chaining modes.

A chaining mode owns its configuration (IV, worker count) and receives the
block cipher as a collaborator on every call, so any ``BlockCipher`` plugs
into any mode. Inputs are validated in full before a single output byte is
written; the only live state (a CBC chain register) is local to one call.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Union

from refcrypto.cipher.base import BlockCipher
from refcrypto.config import load_settings
from refcrypto.errors import CryptoError
from refcrypto.utils.bytes_ops import check_cipher_params, split_blocks

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


class ChainingMode:
    """Chaining mode that needs nothing beyond the key (e.g. ECB)."""

    NAME: str = ""

    def __init__(self, parallel_workers: Optional[int] = None, parallel_min_blocks: Optional[int] = None):
        settings = load_settings()
        self.parallel_workers = settings.parallel_workers if parallel_workers is None else parallel_workers
        self.parallel_min_blocks = (
            settings.parallel_min_blocks if parallel_min_blocks is None else parallel_min_blocks
        )
        if self.parallel_workers < 0:
            raise ValueError("parallel_workers must be >= 0")
        if self.parallel_min_blocks < 1:
            raise ValueError("parallel_min_blocks must be >= 1")

    def cipher(
        self,
        block_cipher: BlockCipher,
        plaintext: BytesLike,
        key: BytesLike,
        out: Optional[WritableBuffer] = None,
    ) -> bytes:
        blocks = self._prepare("cipher", block_cipher, plaintext, key, out)
        result = b"".join(self._cipher_blocks(block_cipher, blocks, bytes(key)))
        return self._emit(result, out)

    def decipher(
        self,
        block_cipher: BlockCipher,
        ciphertext: BytesLike,
        key: BytesLike,
        out: Optional[WritableBuffer] = None,
    ) -> bytes:
        blocks = self._prepare("decipher", block_cipher, ciphertext, key, out)
        result = b"".join(self._decipher_blocks(block_cipher, blocks, bytes(key)))
        return self._emit(result, out)

    def _cipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:  # pragma: no cover
        raise NotImplementedError

    def _decipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:  # pragma: no cover
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, block_cipher: BlockCipher, data: BytesLike, key: BytesLike) -> None:
        block_cipher.check_key(key)

    def _prepare(
        self,
        direction: str,
        block_cipher: BlockCipher,
        data: BytesLike,
        key: BytesLike,
        out: Optional[WritableBuffer],
    ) -> List[bytes]:
        if out is not None and memoryview(out).readonly:
            raise TypeError("out must be a writable buffer (bytearray or writable memoryview)")
        try:
            check_cipher_params(data, data if out is None else out, block_cipher.BLOCK_SIZE)
            self._validate(block_cipher, data, key)
        except CryptoError as e:
            logger.warning("%s.%s with %s rejected input: %s", self.NAME, direction, block_cipher.NAME, e)
            raise
        blocks = split_blocks(data, block_cipher.BLOCK_SIZE)
        logger.debug(
            "%s.%s: cipher=%s blocks=%d workers=%d",
            self.NAME, direction, block_cipher.NAME, len(blocks), self._workers_for(len(blocks)),
        )
        return blocks

    @staticmethod
    def _emit(result: bytes, out: Optional[WritableBuffer]) -> bytes:
        if out is not None:
            out[:] = result
        return result

    # ------------------------------------------------------------------
    # Block dispatch
    # ------------------------------------------------------------------

    def _workers_for(self, num_blocks: int) -> int:
        if self.parallel_workers <= 1 or num_blocks < self.parallel_min_blocks:
            return 1
        return min(self.parallel_workers, num_blocks)

    def _map_blocks(self, func: Callable[[bytes, bytes], bytes], blocks: List[bytes], key: bytes) -> List[bytes]:
        """Apply ``func(block, key)`` to independent blocks, in a pool when configured."""
        workers = self._workers_for(len(blocks))
        if workers == 1:
            return [func(b, key) for b in blocks]
        with ThreadPoolExecutor(max_workers=workers) as ex:
            return list(ex.map(lambda b: func(b, key), blocks))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parallel_workers={self.parallel_workers})"


class ChainingModeWithIV(ChainingMode):
    """Chaining mode seeded by an IV owned by the mode instance (e.g. CBC)."""

    def __init__(
        self,
        iv: BytesLike,
        parallel_workers: Optional[int] = None,
        parallel_min_blocks: Optional[int] = None,
    ):
        super().__init__(parallel_workers=parallel_workers, parallel_min_blocks=parallel_min_blocks)
        self._iv = bytes(iv)

    @property
    def iv(self) -> bytes:
        return self._iv

    def _validate(self, block_cipher: BlockCipher, data: BytesLike, key: BytesLike) -> None:
        super()._validate(block_cipher, data, key)
        block_cipher.check_block(self._iv, what="IV")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(iv={self._iv.hex()}, parallel_workers={self.parallel_workers})"
