import pytest

from refcrypto.cipher import AES128, AES192, AES256
from refcrypto.cipher.aes import SBOX, INV_SBOX, expand_key
from refcrypto.errors import KeySizeError

from conftest import h

PT = "00112233445566778899aabbccddeeff"


@pytest.mark.parametrize(
    "cls,key,ct",
    [
        (AES128, "000102030405060708090a0b0c0d0e0f", "69c4e0d86a7b0430d8cdb78070b4c55a"),
        (AES192, "000102030405060708090a0b0c0d0e0f1011121314151617", "dda97ca4864cdfe06eaf70a0ec0d7191"),
        (
            AES256,
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
            "8ea2b7ca516745bfeafc49904b496089",
        ),
    ],
)
def test_fips197_known_answer(cls, key, ct):
    aes = cls()
    assert aes.cipher(h(PT), h(key)) == h(ct)
    assert aes.decipher(h(ct), h(key)) == h(PT)


def test_sbox_inverse():
    assert all(INV_SBOX[SBOX[i]] == i for i in range(256))


def test_aes128_last_round_key():
    # FIPS-197 appendix A.1
    round_keys = expand_key(h("2b7e151628aed2a6abf7158809cf4f3c"), 10)
    assert len(round_keys) == 11
    assert round_keys[10] == h("d014f9a8c9ee2589e13f0cc8b6630ca6")


def test_wrong_key_size():
    with pytest.raises(KeySizeError):
        AES256().cipher(h(PT), bytes(16))
