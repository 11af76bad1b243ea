from .bytes_ops import (
    bits_to_bytes,
    bytes_to_bits,
    check_cipher_params,
    extract_block,
    permute_bits,
    split_blocks,
    xor_bytes,
)

__all__ = [
    "bits_to_bytes",
    "bytes_to_bits",
    "check_cipher_params",
    "extract_block",
    "permute_bits",
    "split_blocks",
    "xor_bytes",
]
