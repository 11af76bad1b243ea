"""Hash algorithms: MD2 and MD4.

Each hash exposes ``update`` to treat some data and ``finalise`` to compute
the digest (see ``Hash``).
"""
from .base import Hash
from .md2 import MD2
from .md4 import MD4

__all__ = ["Hash", "MD2", "MD4", "builtin_hashes"]


def builtin_hashes():
    return {"md2": MD2, "md4": MD4}
