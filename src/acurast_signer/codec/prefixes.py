"""
Tezos base58check version prefixes.

Byte constants are the network's fixed values; the payload length is the
size of the data encoded after each prefix.
"""

from enum import Enum
from typing import Dict


class Prefix(str, Enum):
    """Version prefix identifiers (the leading characters of the encoded string)."""

    TZ1 = "tz1"
    TZ2 = "tz2"
    TZ3 = "tz3"
    EDPK = "edpk"
    SPPK = "sppk"
    P2PK = "p2pk"
    EDSIG = "edsig"
    SPSIG = "spsig1"
    P2SIG = "p2sig"
    SIG = "sig"


PREFIX_BYTES: Dict[Prefix, bytes] = {
    Prefix.TZ1: bytes([6, 161, 159]),
    Prefix.TZ2: bytes([6, 161, 161]),
    Prefix.TZ3: bytes([6, 161, 164]),
    Prefix.EDPK: bytes([13, 15, 37, 217]),
    Prefix.SPPK: bytes([3, 254, 226, 86]),
    Prefix.P2PK: bytes([3, 178, 139, 127]),
    Prefix.EDSIG: bytes([9, 245, 205, 134, 18]),
    Prefix.SPSIG: bytes([13, 115, 101, 19, 63]),
    Prefix.P2SIG: bytes([54, 240, 44, 52]),
    Prefix.SIG: bytes([4, 130, 43]),
}

PAYLOAD_LENGTH: Dict[Prefix, int] = {
    Prefix.TZ1: 20,
    Prefix.TZ2: 20,
    Prefix.TZ3: 20,
    Prefix.EDPK: 32,
    Prefix.SPPK: 33,
    Prefix.P2PK: 33,
    Prefix.EDSIG: 64,
    Prefix.SPSIG: 64,
    Prefix.P2SIG: 64,
    Prefix.SIG: 64,
}


def prefix_bytes(prefix: Prefix) -> bytes:
    """Get the version bytes for a prefix identifier."""
    return PREFIX_BYTES[Prefix(prefix)]


def prefix_for_bytes(data: bytes):
    """
    Find the known prefix that ``data`` starts with.

    Longer prefixes are tried first so that ``edsig`` is never mistaken for
    a shorter prefix sharing leading bytes.

    Returns:
        Matching Prefix or None
    """
    for prefix, version in sorted(PREFIX_BYTES.items(), key=lambda item: -len(item[1])):
        if data.startswith(version):
            return prefix
    return None


__all__ = ["Prefix", "PREFIX_BYTES", "PAYLOAD_LENGTH", "prefix_bytes", "prefix_for_bytes"]
