"""
Enumerations for the Acurast Tezos signer.
"""

from enum import Enum


class Curve(str, Enum):
    """Elliptic curves supported by the Acurast custodian."""

    ED25519 = "ed25519"  # tz1
    SECP256K1 = "secp256k1"  # tz2
    P256 = "p256"  # tz3

    @classmethod
    def parse(cls, value) -> "Curve":
        """Resolve a curve from an enum member, value or member name (any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for curve in cls:
                if normalized in (curve.value, curve.name.lower()):
                    return curve
        raise ValueError(f"Unknown curve: {value!r}")


__all__ = ["Curve"]
