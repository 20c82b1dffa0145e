"""
Base58check encoding for Tezos identifiers.

The version prefix is prepended to the payload, followed by the first four
bytes of SHA256(SHA256(prefix + payload)), and the result is rendered in the
Bitcoin base58 alphabet.
"""

from __future__ import annotations
from typing import Optional, Tuple

import base58

from ..crypto.hash_utils import double_sha256
from ..runtime.errors import EncodingError, ChecksumError, InvalidPrefixError
from .prefixes import Prefix, PAYLOAD_LENGTH, prefix_bytes, prefix_for_bytes

CHECKSUM_LENGTH = 4


def b58c_encode(payload: bytes, prefix: bytes) -> str:
    """
    Encode a payload with a version prefix and checksum.

    Args:
        payload: Raw bytes to encode
        prefix: Version prefix bytes

    Returns:
        Base58check string
    """
    data = bytes(prefix) + bytes(payload)
    checksum = double_sha256(data)[:CHECKSUM_LENGTH]
    return base58.b58encode(data + checksum).decode("ascii")


def b58c_decode(encoded: str, prefix: Optional[bytes] = None) -> Tuple[bytes, bytes]:
    """
    Decode a base58check string into its version prefix and payload.

    Args:
        encoded: Base58check string
        prefix: Expected version prefix. When omitted the prefix is
            recognised from the known Tezos prefixes.

    Returns:
        Tuple of (prefix_bytes, payload_bytes)

    Raises:
        EncodingError: If the string is not valid base58 or too short
        ChecksumError: If the checksum does not match
        InvalidPrefixError: If the prefix is unknown or not the expected one
    """
    try:
        decoded = base58.b58decode(encoded)
    except ValueError as e:
        raise EncodingError(f"Invalid base58 string: {encoded!r}", cause=e) from e

    if len(decoded) < CHECKSUM_LENGTH:
        raise EncodingError(f"Base58check data too short: {len(decoded)} bytes")

    data, checksum = decoded[:-CHECKSUM_LENGTH], decoded[-CHECKSUM_LENGTH:]
    if double_sha256(data)[:CHECKSUM_LENGTH] != checksum:
        raise ChecksumError(details={"encoded": encoded})

    if prefix is not None:
        prefix = bytes(prefix)
        if not data.startswith(prefix):
            raise InvalidPrefixError(
                f"Expected prefix {prefix.hex()}, got {data[:len(prefix)].hex()}",
                details={"encoded": encoded},
            )
        return prefix, data[len(prefix):]

    known = prefix_for_bytes(data)
    if known is None:
        raise InvalidPrefixError(f"Unknown version prefix in {encoded!r}")
    version = prefix_bytes(known)
    return version, data[len(version):]


def encode_prefixed(payload: bytes, prefix: Prefix) -> str:
    """Encode a payload under a named Tezos prefix."""
    return b58c_encode(payload, prefix_bytes(prefix))


def decode_prefixed(encoded: str, prefix: Prefix) -> bytes:
    """
    Decode a string expected to carry a named Tezos prefix.

    The payload length is checked against the prefix's expected size.

    Returns:
        Payload bytes
    """
    prefix = Prefix(prefix)
    _, payload = b58c_decode(encoded, prefix_bytes(prefix))
    expected = PAYLOAD_LENGTH[prefix]
    if len(payload) != expected:
        raise EncodingError(
            f"Invalid {prefix.value} payload length: expected {expected}, got {len(payload)}"
        )
    return payload


__all__ = ["b58c_encode", "b58c_decode", "encode_prefixed", "decode_prefixed", "CHECKSUM_LENGTH"]
