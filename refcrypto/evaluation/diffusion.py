"""Which ciphertext blocks change when one plaintext block changes."""
from __future__ import annotations

from typing import List

from refcrypto.cipher.base import BlockCipher
from refcrypto.modes.base import BytesLike, ChainingMode


def mode_diffusion(
    mode: ChainingMode,
    cipher: BlockCipher,
    key: BytesLike,
    plaintext: BytesLike,
    block_index: int,
) -> List[int]:
    """Flip the low bit of plaintext block ``block_index`` and report changed ciphertext blocks.

    ECB changes only ``block_index``; CBC changes ``block_index`` and every
    later block.
    """
    bs = cipher.BLOCK_SIZE
    num_blocks = len(plaintext) // bs
    if not 0 <= block_index < num_blocks:
        raise ValueError(f"block_index {block_index} out of range for {num_blocks} blocks")

    altered = bytearray(plaintext)
    altered[block_index * bs + bs - 1] ^= 0x01

    before = mode.cipher(cipher, plaintext, key)
    after = mode.cipher(cipher, altered, key)
    return [
        i for i in range(num_blocks)
        if before[i * bs:(i + 1) * bs] != after[i * bs:(i + 1) * bs]
    ]
