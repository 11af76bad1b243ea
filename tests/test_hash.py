import pytest

from refcrypto.errors import HashFinalisedError
from refcrypto.hash import MD2, MD4

DIGITS = b"1234567890" * 8


@pytest.mark.parametrize(
    "cls,message,digest",
    [
        (MD2, b"", "8350e5a3e24c153df2275c9f80692773"),
        (MD2, b"a", "32ec01ec4a6dac72c0ab96fb34c0b5d1"),
        (MD2, b"abc", "da853b0d3f88d99b30283a69e6ded6bb"),
        (MD2, b"message digest", "ab4f496bfb2a530b219ff33031fe06b0"),
        (MD2, DIGITS, "d5976f79d83d3a0dc9806c3c66f3efd8"),
        (MD4, b"", "31d6cfe0d16ae931b73c59d7e0c089c0"),
        (MD4, b"a", "bde52cb31de33e46245e05fbdbd6fb24"),
        (MD4, b"abc", "a448017aaf21d8525fc10ae87aa6729d"),
        (MD4, b"message digest", "d9130a8164549fe818874806e1c7014b"),
        (MD4, DIGITS, "e33b4ddc9c38f2199c3e7b164fcc0536"),
    ],
)
def test_rfc_vectors(cls, message, digest):
    ctx = cls()
    ctx.update(message)
    assert ctx.hexdigest() == digest


@pytest.mark.parametrize("cls", [MD2, MD4])
@pytest.mark.parametrize("chunk", [1, 3, 16, 63, 64, 65])
def test_streaming_equals_one_shot(cls, chunk):
    data = bytes(range(256)) * 2
    whole = cls()
    whole.update(data)

    pieces = cls()
    for i in range(0, len(data), chunk):
        pieces.update(data[i:i + chunk])
    assert pieces.finalise() == whole.finalise()


@pytest.mark.parametrize("cls", [MD2, MD4])
def test_use_after_finalise(cls):
    ctx = cls()
    ctx.update(b"abc")
    digest = ctx.finalise()
    assert len(digest) == cls.DIGEST_SIZE
    with pytest.raises(HashFinalisedError):
        ctx.update(b"more")
    with pytest.raises(HashFinalisedError):
        ctx.finalise()
