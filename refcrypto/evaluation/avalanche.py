"""Strict Avalanche Criterion (SAC) with a per-bit flip matrix.

Flipping any single input bit should flip each output bit with probability
~0.5. The matrix entry [i, j] is the observed probability that output bit j
flips when input bit i is flipped.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from refcrypto.cipher.base import BlockCipher
from refcrypto.config import load_settings

logger = logging.getLogger(__name__)


@dataclass
class SACResult:
    """SAC measurement for one cipher and one input type."""
    cipher_name: str
    input_type: str             # "plaintext" or "key"
    num_trials: int
    num_input_bits: int
    num_output_bits: int

    per_input_bit_mean: List[float] = field(default_factory=list)
    per_output_bit_mean: List[float] = field(default_factory=list)

    global_mean: float = 0.0    # ~0.5 ideal
    global_std: float = 0.0     # std dev of per-input-bit means
    min_bit_prob: float = 0.0
    max_bit_prob: float = 0.0
    sac_deviation: float = 0.0  # mean |per_input_bit_mean - 0.5| (0.0 = perfect)

    @property
    def passes_sac(self) -> bool:
        """Heuristic: SAC deviation < 0.05 and min_bit_prob > 0.35."""
        return self.sac_deviation < 0.05 and self.min_bit_prob > 0.35

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["passes_sac"] = self.passes_sac
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes_sac else "FAIL"
        return (
            f"[{status}] SAC({self.cipher_name}, {self.input_type}): "
            f"mean={self.global_mean:.4f}, std={self.global_std:.4f}, "
            f"deviation={self.sac_deviation:.4f}, "
            f"min={self.min_bit_prob:.4f}, max={self.max_bit_prob:.4f}"
        )


def _rand_bytes(rng: np.random.Generator, n: int) -> bytes:
    return rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()


def _flip_bit(data: bytes, bit: int) -> bytes:
    """Flip bit ``bit`` counted from the MSB of byte 0."""
    out = bytearray(data)
    out[bit // 8] ^= 0x80 >> (bit % 8)
    return bytes(out)


def _diff_bits(a: bytes, b: bytes) -> np.ndarray:
    return np.unpackbits(np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8))


def compute_sac(
    cipher: BlockCipher,
    *,
    input_type: str = "plaintext",
    trials: int = 200,
    seed: Optional[int] = None,
) -> SACResult:
    """Compute the SAC flip matrix for ``cipher``.

    For each input bit i, ``trials`` random (plaintext, key) pairs are
    enciphered with and without bit i flipped (in the plaintext or the key)
    and the differing output bits are accumulated into row i.
    """
    if input_type == "plaintext":
        num_input_bits = cipher.BLOCK_SIZE * 8
    elif input_type == "key":
        num_input_bits = cipher.KEY_SIZE * 8
    else:
        raise ValueError(f"input_type must be 'plaintext' or 'key', got '{input_type}'")
    if trials < 1:
        raise ValueError("trials must be >= 1")
    if seed is None:
        seed = load_settings().global_seed

    num_output_bits = cipher.BLOCK_SIZE * 8
    rng = np.random.default_rng(seed)
    flips = np.zeros((num_input_bits, num_output_bits), dtype=np.int64)

    for bit_i in range(num_input_bits):
        for _ in range(trials):
            pt = _rand_bytes(rng, cipher.BLOCK_SIZE)
            key = _rand_bytes(rng, cipher.KEY_SIZE)
            ct1 = cipher.cipher(pt, key)
            if input_type == "plaintext":
                ct2 = cipher.cipher(_flip_bit(pt, bit_i), key)
            else:
                ct2 = cipher.cipher(pt, _flip_bit(key, bit_i))
            flips[bit_i] += _diff_bits(ct1, ct2)

    probs = flips / trials
    per_input = probs.mean(axis=1)

    result = SACResult(
        cipher_name=cipher.NAME,
        input_type=input_type,
        num_trials=trials,
        num_input_bits=num_input_bits,
        num_output_bits=num_output_bits,
        per_input_bit_mean=[round(float(p), 6) for p in per_input],
        per_output_bit_mean=[round(float(p), 6) for p in probs.mean(axis=0)],
        global_mean=round(float(per_input.mean()), 6),
        global_std=round(float(per_input.std(ddof=1)) if num_input_bits > 1 else 0.0, 6),
        min_bit_prob=round(float(per_input.min()), 6),
        max_bit_prob=round(float(per_input.max()), 6),
        sac_deviation=round(float(np.abs(per_input - 0.5).mean()), 6),
    )
    logger.info(result.summary())
    return result
