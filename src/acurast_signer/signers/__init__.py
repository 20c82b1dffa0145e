"""
Signing infrastructure for the Acurast Tezos signer.

Provides the curve prefix registry, identity derivation, the custodian
interface and the AcurastSigner itself.
"""

from .registry import (
    PrefixProfile,
    GENERIC_SIGNATURE_PREFIX,
    profile_for,
    curve_for_address,
    curve_for_public_key,
)
from .custodian import Custodian, RawSigner, FunctionRawSigner, StaticCustodian
from .identity import EncodedIdentity, derive_public_key, derive_address, derive_identity
from .options import SignerOptions
from .signer import AcurastSigner, SignatureResult

__all__ = [
    # Registry
    "PrefixProfile",
    "GENERIC_SIGNATURE_PREFIX",
    "profile_for",
    "curve_for_address",
    "curve_for_public_key",
    # Custodian
    "Custodian",
    "RawSigner",
    "FunctionRawSigner",
    "StaticCustodian",
    # Identity
    "EncodedIdentity",
    "derive_public_key",
    "derive_address",
    "derive_identity",
    # Signer
    "SignerOptions",
    "AcurastSigner",
    "SignatureResult",
]
