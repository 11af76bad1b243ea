import pytest
from pydantic import ValidationError

from refcrypto.vectors import KNOWN_ANSWER_VECTORS, KnownAnswerVector, run_known_answer_tests


def test_all_published_vectors_pass():
    results = run_known_answer_tests()
    assert len(results) == len(KNOWN_ANSWER_VECTORS)
    failed = [r.summary() for r in results if not r.passed]
    assert failed == []


def test_hex_fields_are_decoded():
    vec = KnownAnswerVector(
        name="DES sample",
        algorithm="DES",
        kind="block",
        key="13 34 57 79 9B BC DF F1",
        input="0123456789ABCDEF",
        expected="85E813540F0AB405",
    )
    assert vec.key == bytes.fromhex("133457799BBCDFF1")
    assert vec.algorithm == "des"


def test_bad_hex_rejected():
    with pytest.raises(ValidationError):
        KnownAnswerVector(name="bad", algorithm="des", kind="block", input="zz", expected="00")


def test_mismatch_and_errors_are_reported_not_raised():
    wrong = KnownAnswerVector(
        name="DES wrong expectation", algorithm="des", kind="block",
        key="133457799BBCDFF1", input="0123456789ABCDEF", expected="0000000000000000",
    )
    short_key = KnownAnswerVector(
        name="DES short key", algorithm="des", kind="block",
        key="1334", input="0123456789ABCDEF", expected="85E813540F0AB405",
    )
    results = run_known_answer_tests(vectors=[wrong, short_key])
    assert [r.passed for r in results] == [False, False]
    assert results[0].actual_hex == "85e813540f0ab405"
    assert results[0].error is None
    assert "KeySizeError" in results[1].error
