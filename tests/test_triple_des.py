import pytest

from refcrypto.cipher import DES, TripleDES2K, TripleDES3K
from refcrypto.errors import KeySizeError

from conftest import h

K1 = "0123456789ABCDEF"
K2 = "23456789ABCDEF01"
K3 = "456789ABCDEF0123"
PT = "6BC1BEE22E409F96"


def test_two_key_known_answer():
    tdes = TripleDES2K()
    ct = tdes.cipher(h(PT), h(K1 + K2))
    assert ct == h("06EDE3D82884090A")
    assert tdes.decipher(ct, h(K1 + K2)) == h(PT)


def test_three_key_known_answer():
    tdes = TripleDES3K()
    ct = tdes.cipher(h(PT), h(K1 + K2 + K3))
    assert ct == h("714772F339841D34")
    assert tdes.decipher(ct, h(K1 + K2 + K3)) == h(PT)


def test_two_key_is_three_key_with_k3_equal_k1():
    pt = h(PT)
    assert TripleDES2K().cipher(pt, h(K1 + K2)) == TripleDES3K().cipher(pt, h(K1 + K2 + K1))


def test_single_key_degenerates_to_des():
    pt = h(PT)
    assert TripleDES3K().cipher(pt, h(K1 * 3)) == DES().cipher(pt, h(K1))


def test_shared_des_instance():
    des = DES(cache_key_schedule=True)
    tdes = TripleDES2K(des=des)
    tdes.cipher(h(PT), h(K1 + K2))
    assert tdes.des is des
    assert des._derive.cache_info().currsize == 2


@pytest.mark.parametrize("cls,size", [(TripleDES2K, 24), (TripleDES3K, 16), (TripleDES3K, 8)])
def test_wrong_key_size(cls, size):
    with pytest.raises(KeySizeError):
        cls().cipher(h(PT), bytes(size))
