"""Roundtrip verification P = D(E(P, K, IV), K, IV) through a chaining mode.

Generates random (key, iv, plaintext) vectors for a registered cipher and
checks that deciphering recovers the plaintext for every vector.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

from refcrypto.cipher.registry import CipherRegistry
from refcrypto.config import load_settings
from refcrypto.modes import CBC, ECB, ChainingMode

logger = logging.getLogger(__name__)

MODES = ("ECB", "CBC")


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    iv_hex: str
    ciphertext_hex: str
    decrypted_hex: str
    error: Optional[str]


@dataclass
class RoundtripResult:
    cipher_name: str
    mode: str
    block_size: int
    key_size: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.cipher_name}/{self.mode}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def _make_mode(mode: str, iv: bytes, parallel_workers: Optional[int]) -> ChainingMode:
    if mode == "ECB":
        return ECB(parallel_workers=parallel_workers)
    if mode == "CBC":
        return CBC(iv, parallel_workers=parallel_workers)
    raise ValueError(f"mode must be one of {MODES}, got '{mode}'")


def run_roundtrip_tests(
    name: str,
    mode: str = "CBC",
    *,
    num_vectors: int = 100,
    max_blocks: int = 4,
    seed: Optional[int] = None,
    max_failures_recorded: int = 10,
    parallel_workers: Optional[int] = None,
    registry: Optional[CipherRegistry] = None,
) -> RoundtripResult:
    """Run roundtrip verification for one cipher through one chaining mode.

    Args:
        name: Cipher registry name (e.g. "des", "aes128").
        mode: "ECB" or "CBC".
        num_vectors: Number of random (key, iv, plaintext) triples.
        max_blocks: Plaintexts are 1..max_blocks blocks long.
        seed: Random seed; defaults to the configured global seed.
        max_failures_recorded: Maximum number of failure details to keep.
        parallel_workers: Passed to the mode; None uses the configured value.
        registry: Optional cipher registry; uses the built-in one if not provided.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    mode = mode.upper()
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got '{mode}'")
    if max_blocks < 1:
        raise ValueError("max_blocks must be >= 1")
    if seed is None:
        seed = load_settings().global_seed

    reg = registry or CipherRegistry()
    cipher = reg.create(name)
    bs, ks = cipher.BLOCK_SIZE, cipher.KEY_SIZE

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        key = _rand_bytes(rng, ks)
        iv = _rand_bytes(rng, bs)
        pt = _rand_bytes(rng, bs * rng.randint(1, max_blocks))
        ct = b""
        pt2 = b""

        try:
            chain = _make_mode(mode, iv, parallel_workers)
            ct = chain.cipher(cipher, pt, key)
            pt2 = chain.decipher(cipher, ct, key)
            error = None
        except Exception as exc:
            error = str(exc)

        if error is None and pt == pt2:
            passed += 1
            continue

        failed += 1
        if len(failures) < max_failures_recorded:
            failures.append(RoundtripFailure(
                vector_index=i,
                plaintext_hex=pt.hex(),
                key_hex=key.hex(),
                iv_hex=iv.hex() if mode == "CBC" else "",
                ciphertext_hex=ct.hex() if error is None else "<error>",
                decrypted_hex=pt2.hex() if error is None else "<error>",
                error=error,
            ))

    elapsed = time.perf_counter() - start

    result = RoundtripResult(
        cipher_name=cipher.NAME,
        mode=mode,
        block_size=bs,
        key_size=ks,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    logger.info(result.summary())
    return result


def run_all_ciphers(
    *,
    num_vectors: int = 100,
    max_blocks: int = 4,
    seed: Optional[int] = None,
    modes: tuple = MODES,
    parallel_workers: Optional[int] = None,
    registry: Optional[CipherRegistry] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every registered cipher through every mode.

    Returns:
        List of RoundtripResult sorted by (cipher name, mode).
    """
    reg = registry or CipherRegistry()
    names = reg.list_names()
    results: List[RoundtripResult] = []

    for idx, name in enumerate(names):
        if progress_callback:
            progress_callback(name, idx, len(names))
        for mode in modes:
            results.append(run_roundtrip_tests(
                name,
                mode,
                num_vectors=num_vectors,
                max_blocks=max_blocks,
                seed=seed,
                parallel_workers=parallel_workers,
                registry=reg,
            ))

    return sorted(results, key=lambda r: (r.cipher_name, r.mode))
