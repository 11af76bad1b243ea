from __future__ import annotations

from typing import Union

from refcrypto.errors import HashFinalisedError

BytesLike = Union[bytes, bytearray, memoryview]


class Hash:
    """Streaming hash.

    ``update`` may be called any number of times; ``update(a); update(b)`` is
    equivalent to ``update(a + b)``. ``finalise`` pads, returns the digest and
    closes the context: further ``update``/``finalise`` calls raise
    ``HashFinalisedError``.
    """

    NAME: str = ""
    DIGEST_SIZE: int = 0
    BLOCK_SIZE: int = 0

    def __init__(self):
        self._buffer = bytearray()
        self._finalised = False

    def update(self, data: BytesLike) -> None:
        self._ensure_open()
        self._buffer.extend(data)
        full = len(self._buffer) - len(self._buffer) % self.BLOCK_SIZE
        for i in range(0, full, self.BLOCK_SIZE):
            self._process_block(bytes(self._buffer[i:i + self.BLOCK_SIZE]))
        del self._buffer[:full]
        self._on_update(len(data))

    def finalise(self) -> bytes:
        self._ensure_open()
        self._finalised = True
        return self._finalise(bytes(self._buffer))

    def hexdigest(self) -> str:
        return self.finalise().hex()

    def _on_update(self, length: int) -> None:
        pass

    def _ensure_open(self) -> None:
        if self._finalised:
            raise HashFinalisedError(self.NAME)

    def _process_block(self, block: bytes) -> None:  # pragma: no cover
        raise NotImplementedError

    def _finalise(self, remaining: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError
