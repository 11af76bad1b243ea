import pytest

from refcrypto.errors import AlignmentError, CryptoError, LengthMismatchError
from refcrypto.utils import (
    bits_to_bytes,
    bytes_to_bits,
    check_cipher_params,
    extract_block,
    permute_bits,
    split_blocks,
    xor_bytes,
)


def test_check_cipher_params_length_before_alignment():
    # both conditions fail; the length mismatch is reported
    with pytest.raises(LengthMismatchError) as exc:
        check_cipher_params(bytes(5), bytes(7), 8)
    assert "same length" in str(exc.value)


def test_check_cipher_params_alignment():
    with pytest.raises(AlignmentError) as exc:
        check_cipher_params(bytes(12), bytes(12), 8)
    assert exc.value.length == 12
    assert exc.value.block_size == 8
    assert "multiple of block size" in str(exc.value)


def test_check_cipher_params_accepts_empty_and_aligned():
    check_cipher_params(b"", b"", 8)
    check_cipher_params(bytes(24), bytearray(24), 8)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        xor_bytes(b"ab", b"a")
    assert issubclass(AlignmentError, CryptoError)


def test_xor_and_blocks():
    assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
    assert split_blocks(bytes(range(6)), 3) == [b"\x00\x01\x02", b"\x03\x04\x05"]
    assert extract_block(bytes(range(6)), 2, 2) == b"\x02\x03"
    with pytest.raises(AlignmentError):
        extract_block(bytes(4), 2, 3)


def test_bit_helpers():
    bits = bytes_to_bits(b"\x80\x01")
    assert bits[0] == 1 and bits[15] == 1 and sum(bits) == 2
    assert bits_to_bytes(bits) == b"\x80\x01"
    # 1-based table: take bit 16 then bit 1
    assert permute_bits(bits, (16, 1)) == [1, 1]
