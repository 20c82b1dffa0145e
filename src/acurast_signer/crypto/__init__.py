"""
Hash primitives for the Acurast Tezos signer.

Signing math is delegated to the custodian; only digests live here.
"""

from .hash_utils import (
    digest,
    blake2b_256,
    blake2b_160,
    double_sha256,
    PAYLOAD_DIGEST_SIZE,
    ADDRESS_DIGEST_SIZE,
)

__all__ = [
    "digest",
    "blake2b_256",
    "blake2b_160",
    "double_sha256",
    "PAYLOAD_DIGEST_SIZE",
    "ADDRESS_DIGEST_SIZE",
]
