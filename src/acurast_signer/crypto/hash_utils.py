"""
Hash utilities for the Acurast Tezos signer.

Tezos hashes with BLAKE2b at variable output length: 32 bytes for signing
payloads and 20 bytes for public key hashes (addresses).
"""

import hashlib

# Output length limits of BLAKE2b
MAX_DIGEST_SIZE = hashlib.blake2b.MAX_DIGEST_SIZE

PAYLOAD_DIGEST_SIZE = 32
ADDRESS_DIGEST_SIZE = 20


def digest(data: bytes, output_length: int) -> bytes:
    """
    Calculate an unkeyed BLAKE2b digest of the given length.

    Args:
        data: Data to hash
        output_length: Digest length in bytes (1-64)

    Returns:
        Digest of exactly ``output_length`` bytes

    Raises:
        ValueError: If data is not bytes or the length is out of range
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise ValueError(f"data must be bytes, got {type(data).__name__}")
    if not 1 <= output_length <= MAX_DIGEST_SIZE:
        raise ValueError(f"output_length must be between 1 and {MAX_DIGEST_SIZE}, got {output_length}")

    return hashlib.blake2b(bytes(data), digest_size=output_length).digest()


def blake2b_256(data: bytes) -> bytes:
    """BLAKE2b-256, used to pre-hash signing payloads."""
    return digest(data, PAYLOAD_DIGEST_SIZE)


def blake2b_160(data: bytes) -> bytes:
    """BLAKE2b-160, used to hash public keys into addresses."""
    return digest(data, ADDRESS_DIGEST_SIZE)


def double_sha256(data: bytes) -> bytes:
    """
    Calculate double SHA256 hash.

    Used for the base58check checksum.

    Args:
        data: Data to hash

    Returns:
        SHA256(SHA256(data))
    """
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError("data must be bytes")

    first_hash = hashlib.sha256(data).digest()
    return hashlib.sha256(first_hash).digest()
