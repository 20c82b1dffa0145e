"""
Codec package for the Acurast Tezos signer.

Provides base58check encoding and the Tezos version prefix table.
"""

from .prefixes import Prefix, PREFIX_BYTES, PAYLOAD_LENGTH, prefix_bytes, prefix_for_bytes
from .base58check import b58c_encode, b58c_decode, encode_prefixed, decode_prefixed

__all__ = [
    "Prefix",
    "PREFIX_BYTES",
    "PAYLOAD_LENGTH",
    "prefix_bytes",
    "prefix_for_bytes",
    "b58c_encode",
    "b58c_decode",
    "encode_prefixed",
    "decode_prefixed",
]
