"""Published known-answer vectors and a runner that checks them.

Sources: FIPS 46-3 worked example (DES), NIST SP 800-67 / SP 800-38A
(Triple-DES, AES ECB and CBC), FIPS-197 appendix C (AES), RFC 1319 and
RFC 1320 test suites (MD2, MD4).
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from refcrypto.cipher.registry import CipherRegistry
from refcrypto.hash import builtin_hashes
from refcrypto.modes import CBC, ECB

logger = logging.getLogger(__name__)

VectorKind = Literal["block", "ECB", "CBC", "hash"]


class KnownAnswerVector(BaseModel):
    """One published vector. Byte fields accept hex strings (whitespace ignored) or raw bytes."""

    name: str = Field(..., min_length=3)
    algorithm: str = Field(..., description="Cipher registry name, or hash name for kind='hash'")
    kind: VectorKind
    key: bytes = Field(default=b"")
    iv: bytes = Field(default=b"")
    input: bytes
    expected: bytes

    @field_validator("key", "iv", "input", "expected", mode="before")
    @classmethod
    def _from_hex(cls, v: Union[str, bytes]) -> bytes:
        if isinstance(v, str):
            return bytes.fromhex("".join(v.split()))
        return v

    @field_validator("algorithm")
    @classmethod
    def _lower(cls, v: str) -> str:
        return v.lower()


@dataclass
class KnownAnswerResult:
    name: str
    algorithm: str
    kind: str
    passed: bool
    expected_hex: str
    actual_hex: str
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        detail = f" ({self.error})" if self.error else ""
        return f"[{status}] {self.name}{detail}"


KNOWN_ANSWER_VECTORS: List[KnownAnswerVector] = [
    # DES
    KnownAnswerVector(
        name="DES FIPS 46-3 worked example",
        algorithm="des",
        kind="block",
        key="133457799BBCDFF1",
        input="0123456789ABCDEF",
        expected="85E813540F0AB405",
    ),
    KnownAnswerVector(
        name="DES all-zero ciphertext",
        algorithm="des",
        kind="block",
        key="0E329232EA6D0D73",
        input="8787878787878787",
        expected="0000000000000000",
    ),
    # Triple-DES
    KnownAnswerVector(
        name="3DES 2-key",
        algorithm="3des-2k",
        kind="block",
        key="0123456789ABCDEF 23456789ABCDEF01",
        input="6BC1BEE22E409F96",
        expected="06EDE3D82884090A",
    ),
    KnownAnswerVector(
        name="3DES 3-key",
        algorithm="3des-3k",
        kind="block",
        key="0123456789ABCDEF 23456789ABCDEF01 456789ABCDEF0123",
        input="6BC1BEE22E409F96",
        expected="714772F339841D34",
    ),
    # AES single block
    KnownAnswerVector(
        name="AES-128 FIPS-197 C.1",
        algorithm="aes128",
        kind="block",
        key="000102030405060708090a0b0c0d0e0f",
        input="00112233445566778899aabbccddeeff",
        expected="69c4e0d86a7b0430d8cdb78070b4c55a",
    ),
    KnownAnswerVector(
        name="AES-192 FIPS-197 C.2",
        algorithm="aes192",
        kind="block",
        key="000102030405060708090a0b0c0d0e0f1011121314151617",
        input="00112233445566778899aabbccddeeff",
        expected="dda97ca4864cdfe06eaf70a0ec0d7191",
    ),
    KnownAnswerVector(
        name="AES-256 FIPS-197 C.3",
        algorithm="aes256",
        kind="block",
        key="000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
        input="00112233445566778899aabbccddeeff",
        expected="8ea2b7ca516745bfeafc49904b496089",
    ),
    # Chaining modes
    KnownAnswerVector(
        name="AES-128 ECB two blocks",
        algorithm="aes128",
        kind="ECB",
        key="2B7E151628AED2A6ABF7158809CF4F3C",
        input="6BC1BEE22E409F96E93D7E117393172A 6BC1BEE22E409F96E93D7E117393172A",
        expected="3AD77BB40D7A3660A89ECAF32466EF97 3AD77BB40D7A3660A89ECAF32466EF97",
    ),
    KnownAnswerVector(
        name="AES-128 CBC SP 800-38A",
        algorithm="aes128",
        kind="CBC",
        key="2B7E151628AED2A6ABF7158809CF4F3C",
        iv="000102030405060708090A0B0C0D0E0F",
        input="6BC1BEE22E409F96E93D7E117393172A AE2D8A571E03AC9C9EB76FAC45AF8E51",
        expected="7649ABAC8119B246CEE98E9B12E9197D 5086CB9B507219EE95DB113A917678B2",
    ),
    # MD2 (RFC 1319)
    KnownAnswerVector(name="MD2 empty", algorithm="md2", kind="hash", input=b"",
                      expected="8350e5a3e24c153df2275c9f80692773"),
    KnownAnswerVector(name="MD2 abc", algorithm="md2", kind="hash", input=b"abc",
                      expected="da853b0d3f88d99b30283a69e6ded6bb"),
    KnownAnswerVector(name="MD2 digits x8", algorithm="md2", kind="hash", input=b"1234567890" * 8,
                      expected="d5976f79d83d3a0dc9806c3c66f3efd8"),
    # MD4 (RFC 1320)
    KnownAnswerVector(name="MD4 empty", algorithm="md4", kind="hash", input=b"",
                      expected="31d6cfe0d16ae931b73c59d7e0c089c0"),
    KnownAnswerVector(name="MD4 abc", algorithm="md4", kind="hash", input=b"abc",
                      expected="a448017aaf21d8525fc10ae87aa6729d"),
    KnownAnswerVector(name="MD4 digits x8", algorithm="md4", kind="hash", input=b"1234567890" * 8,
                      expected="e33b4ddc9c38f2199c3e7b164fcc0536"),
]


def _compute(vec: KnownAnswerVector, registry: CipherRegistry) -> bytes:
    if vec.kind == "hash":
        h = builtin_hashes()[vec.algorithm]()
        h.update(vec.input)
        return h.finalise()
    cipher = registry.create(vec.algorithm)
    if vec.kind == "block":
        return cipher.cipher(vec.input, vec.key)
    mode = ECB(parallel_workers=1) if vec.kind == "ECB" else CBC(vec.iv, parallel_workers=1)
    ct = mode.cipher(cipher, vec.input, vec.key)
    # modes must also invert their own vector
    if mode.decipher(cipher, ct, vec.key) != vec.input:
        raise AssertionError("decipher did not recover the plaintext")
    return ct


def run_known_answer_tests(
    registry: Optional[CipherRegistry] = None,
    vectors: Optional[List[KnownAnswerVector]] = None,
) -> List[KnownAnswerResult]:
    """Check every vector; a raised exception is recorded as a failure."""
    reg = registry or CipherRegistry()
    results: List[KnownAnswerResult] = []

    for vec in vectors if vectors is not None else KNOWN_ANSWER_VECTORS:
        actual = b""
        error = None
        try:
            actual = _compute(vec, reg)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
        results.append(KnownAnswerResult(
            name=vec.name,
            algorithm=vec.algorithm,
            kind=vec.kind,
            passed=error is None and actual == vec.expected,
            expected_hex=vec.expected.hex(),
            actual_hex=actual.hex(),
            error=error,
        ))

    failed = [r for r in results if not r.passed]
    logger.info("Known-answer tests: %d/%d passed", len(results) - len(failed), len(results))
    for r in failed:
        logger.info(r.summary())
    return results
