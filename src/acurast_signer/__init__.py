"""
Acurast Tezos Signer

Derives Tezos public keys, addresses and signatures from keys held by an
Acurast custodian. The custodian keeps the private keys and performs the raw
signing; this package only hashes and encodes.
"""

from .enums import Curve
from .runtime.errors import *
from .codec import Prefix, b58c_encode, b58c_decode, encode_prefixed, decode_prefixed
from .crypto import digest
from .signers import *

__version__ = "0.1.0"
__all__ = [
    "Curve",
    "Prefix",
    "b58c_encode",
    "b58c_decode",
    "encode_prefixed",
    "decode_prefixed",
    "digest",

    # Errors
    "ErrorCode",
    "SignerError",
    "SignerUnavailableError",
    "PublicKeyUnavailableError",
    "AddressUnavailableError",
    "SecretKeyProhibitedError",
    "EncodingError",
    "ChecksumError",
    "InvalidPrefixError",

    # Signers
    "PrefixProfile",
    "GENERIC_SIGNATURE_PREFIX",
    "profile_for",
    "curve_for_address",
    "curve_for_public_key",
    "Custodian",
    "RawSigner",
    "FunctionRawSigner",
    "StaticCustodian",
    "EncodedIdentity",
    "derive_public_key",
    "derive_address",
    "derive_identity",
    "SignerOptions",
    "AcurastSigner",
    "SignatureResult",
]
