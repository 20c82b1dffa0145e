"""Runtime helpers for the Acurast Tezos signer"""

from .errors import *

__all__ = [
    "ErrorCode",
    "SignerError",
    "SignerUnavailableError",
    "PublicKeyUnavailableError",
    "AddressUnavailableError",
    "SecretKeyProhibitedError",
    "EncodingError",
    "ChecksumError",
    "InvalidPrefixError",
]
