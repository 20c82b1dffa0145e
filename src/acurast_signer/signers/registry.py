"""
Curve prefix registry for the Acurast Tezos signer.

Maps each curve to its public key, address and signature prefixes and to the
names under which the custodian exposes the curve's raw signer and public key.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..enums import Curve
from ..codec.base58check import b58c_decode
from ..codec.prefixes import Prefix, prefix_bytes, prefix_for_bytes
from ..runtime.errors import InvalidPrefixError


@dataclass(frozen=True)
class PrefixProfile:
    """Prefixes and custodian capability names for one curve."""

    public_key_prefix: bytes
    address_prefix: bytes
    signature_prefix: bytes
    signer_capability_name: str
    public_key_capability_name: str


# Curve-independent prefix of the generic ``sig`` encoding
GENERIC_SIGNATURE_PREFIX = prefix_bytes(Prefix.SIG)

# The P256 signer is registered as "secp256r1" while its public key is keyed
# "p256" by the custodian.
_PROFILES: Mapping[Curve, PrefixProfile] = MappingProxyType({
    Curve.ED25519: PrefixProfile(
        public_key_prefix=prefix_bytes(Prefix.EDPK),
        address_prefix=prefix_bytes(Prefix.TZ1),
        signature_prefix=prefix_bytes(Prefix.EDSIG),
        signer_capability_name="ed25519",
        public_key_capability_name="ed25519",
    ),
    Curve.SECP256K1: PrefixProfile(
        public_key_prefix=prefix_bytes(Prefix.SPPK),
        address_prefix=prefix_bytes(Prefix.TZ2),
        signature_prefix=prefix_bytes(Prefix.SPSIG),
        signer_capability_name="secp256k1",
        public_key_capability_name="secp256k1",
    ),
    Curve.P256: PrefixProfile(
        public_key_prefix=prefix_bytes(Prefix.P2PK),
        address_prefix=prefix_bytes(Prefix.TZ3),
        signature_prefix=prefix_bytes(Prefix.P2SIG),
        signer_capability_name="secp256r1",
        public_key_capability_name="p256",
    ),
})

_CURVE_BY_ADDRESS = {Prefix.TZ1: Curve.ED25519, Prefix.TZ2: Curve.SECP256K1, Prefix.TZ3: Curve.P256}
_CURVE_BY_PUBLIC_KEY = {Prefix.EDPK: Curve.ED25519, Prefix.SPPK: Curve.SECP256K1, Prefix.P2PK: Curve.P256}


def profile_for(curve: Curve) -> PrefixProfile:
    """
    Get the prefix profile for a curve.

    Args:
        curve: Curve enum member or its string value

    Returns:
        The curve's PrefixProfile
    """
    return _PROFILES[Curve.parse(curve)]


def _curve_for(encoded: str, table: Mapping[Prefix, Curve], kind: str) -> Curve:
    version, _ = b58c_decode(encoded)
    prefix = prefix_for_bytes(version)
    if prefix not in table:
        raise InvalidPrefixError(f"Not a {kind}: {encoded!r}")
    return table[prefix]


def curve_for_address(encoded: str) -> Curve:
    """Resolve the curve of a ``tz1``/``tz2``/``tz3`` address."""
    return _curve_for(encoded, _CURVE_BY_ADDRESS, "Tezos address")


def curve_for_public_key(encoded: str) -> Curve:
    """Resolve the curve of an ``edpk``/``sppk``/``p2pk`` public key."""
    return _curve_for(encoded, _CURVE_BY_PUBLIC_KEY, "Tezos public key")


__all__ = [
    "PrefixProfile",
    "GENERIC_SIGNATURE_PREFIX",
    "profile_for",
    "curve_for_address",
    "curve_for_public_key",
]
