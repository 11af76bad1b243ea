"""Cipher Block Chaining.

Encryption:
```text
          P1        P2        Pn
          |         |         |
   IV ----+     ----+     ----+
          |    |    |    |    |
         ---   |   ---   |   ---
        | K |  |  | K | ... | K |
         ---   |   ---   |   ---
          |    |    |    |    |
          |----     |----     |
          |         |         |
          C1        C2        Cn
```

Encryption is strictly sequential. Decryption only needs the current and
previous ciphertext blocks, so the block decryptions are independent and can
run in the worker pool.
"""
from __future__ import annotations

from typing import List

from refcrypto.cipher.base import BlockCipher
from refcrypto.utils.bytes_ops import xor_bytes

from .base import ChainingModeWithIV


class CBC(ChainingModeWithIV):
    NAME = "CBC"

    def _cipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:
        res = []
        chain = self.iv
        for p in blocks:
            c = block_cipher.encrypt_block(xor_bytes(p, chain), key)
            res.append(c)
            chain = c
        return res

    def _decipher_blocks(self, block_cipher: BlockCipher, blocks: List[bytes], key: bytes) -> List[bytes]:
        decrypted = self._map_blocks(block_cipher.decrypt_block, blocks, key)
        # chain register = previous ciphertext block, never the recovered plaintext
        chains = [self.iv] + blocks[:-1]
        return [xor_bytes(d, prev) for d, prev in zip(decrypted, chains)]
