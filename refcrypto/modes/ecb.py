"""Electronic Code Book: every block is transformed independently.

```text
      P1        P2        Pn
      |         |         |
     ---       ---       ---
    | K |     | K | ... | K |
     ---       ---       ---
      |         |         |
      C1        C2        Cn
```
"""
from __future__ import annotations

from typing import List

from refcrypto.cipher.base import BlockCipher

from .base import ChainingMode


class ECB(ChainingMode):
    NAME = "ECB"

    def _cipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:
        return self._map_blocks(block_cipher.encrypt_block, blocks, key)

    def _decipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:
        return self._map_blocks(block_cipher.decrypt_block, blocks, key)
