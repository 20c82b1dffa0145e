"""
Identity derivation from raw public keys.

The encoded public key is the raw key under the curve's public key prefix;
the address is the BLAKE2b-160 of the raw key under the address prefix.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..enums import Curve
from ..codec.base58check import b58c_encode
from ..crypto.hash_utils import digest, ADDRESS_DIGEST_SIZE
from ..runtime.errors import PublicKeyUnavailableError, AddressUnavailableError
from .registry import profile_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedIdentity:
    """Encoded public key and address of one curve's key."""

    public_key: str
    address: str


def derive_public_key(curve: Curve, raw_public_key: Optional[bytes]) -> str:
    """
    Encode a raw public key.

    Raises:
        PublicKeyUnavailableError: If no raw public key is available
    """
    if not raw_public_key:
        raise PublicKeyUnavailableError()

    return b58c_encode(raw_public_key, profile_for(curve).public_key_prefix)


def derive_address(curve: Curve, raw_public_key: Optional[bytes]) -> str:
    """
    Derive the address (public key hash) of a raw public key.

    Raises:
        AddressUnavailableError: If no raw public key is available
    """
    if not raw_public_key:
        raise AddressUnavailableError()

    return b58c_encode(digest(raw_public_key, ADDRESS_DIGEST_SIZE), profile_for(curve).address_prefix)


def derive_identity(curve: Curve, raw_public_key: Optional[bytes]) -> EncodedIdentity:
    """
    Derive both the encoded public key and the address.

    Args:
        curve: Curve of the key
        raw_public_key: Raw public key bytes, or None if the custodian has none

    Returns:
        EncodedIdentity

    Raises:
        PublicKeyUnavailableError: If no raw public key is available
    """
    identity = EncodedIdentity(
        public_key=derive_public_key(curve, raw_public_key),
        address=derive_address(curve, raw_public_key),
    )
    logger.debug(f"Derived {Curve.parse(curve).value} identity {identity.address}")
    return identity


__all__ = ["EncodedIdentity", "derive_public_key", "derive_address", "derive_identity"]
