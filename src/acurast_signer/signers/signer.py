r"""
Tezos signer backed by an Acurast custodian.

Produces Tezos public keys, addresses and signatures for one curve while the
private key and the signing math stay inside the custodian.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
import logging

from ..enums import Curve
from ..codec.base58check import b58c_encode
from ..crypto.hash_utils import digest, PAYLOAD_DIGEST_SIZE
from ..runtime.errors import EncodingError, SignerUnavailableError, SecretKeyProhibitedError
from .custodian import Custodian, RawSigner, RawSignature
from .identity import EncodedIdentity, derive_address, derive_identity, derive_public_key
from .options import SignerOptions
from .registry import GENERIC_SIGNATURE_PREFIX, PrefixProfile, profile_for

logger = logging.getLogger(__name__)

MagicByte = Union[bytes, bytearray, int]


@dataclass(frozen=True)
class SignatureResult:
    """
    Signature of one operation.

    Attributes:
        bytes: The operation hex as given
        sig: Raw signature under the generic ``sig`` prefix
        prefix_sig: Raw signature under the curve's signature prefix
        sbytes: Operation hex followed by the raw signature hex
    """

    bytes: str
    sig: str
    prefix_sig: str
    sbytes: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to the Taquito signature mapping."""
        return {
            "bytes": self.bytes,
            "sig": self.sig,
            "prefixSig": self.prefix_sig,
            "sbytes": self.sbytes,
        }


def _magic_byte_prefix(magic_byte: Optional[MagicByte]) -> bytes:
    if magic_byte is None:
        return b""
    if isinstance(magic_byte, int):
        if not 0 <= magic_byte <= 0xFF:
            raise ValueError(f"Magic byte must be in range 0-255, got {magic_byte}")
        return bytes([magic_byte])
    if len(magic_byte) != 1:
        raise ValueError(f"Magic byte must be exactly 1 byte, got {len(magic_byte)}")
    return bytes(magic_byte)


def _decode_hex(value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise EncodingError(f"Invalid {what} hex: {e}", cause=e) from e


def _raw_signature_bytes(signature: RawSignature) -> bytes:
    if isinstance(signature, str):
        return _decode_hex(signature, "raw signature")
    return bytes(signature)


class AcurastSigner:
    """
    Tezos signer for one curve of an Acurast custodian.

    Every call consults the custodian afresh; nothing is cached.
    """

    def __init__(self, custodian: Custodian, curve: Union[Curve, str] = Curve.P256):
        """
        Initialize the signer.

        Args:
            custodian: Custodian providing raw signers and public keys
            curve: Curve of the key to use (default: P256)
        """
        self._custodian = custodian
        self._curve = Curve.parse(curve)
        self._profile = profile_for(self._curve)

    @classmethod
    def from_options(cls, custodian: Custodian, options: Optional[SignerOptions] = None) -> AcurastSigner:
        """Create a signer from SignerOptions."""
        options = options or SignerOptions()
        return cls(custodian, options.curve)

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def profile(self) -> PrefixProfile:
        return self._profile

    def sign(self, op: str, magic_byte: Optional[MagicByte] = None) -> SignatureResult:
        """
        Sign an operation.

        The payload (magic byte, if any, followed by the operation bytes) is
        hashed with BLAKE2b-256 and the digest is handed to the custodian's
        raw signer.

        Args:
            op: Operation bytes as hex
            magic_byte: Optional single leading byte (e.g. 0x03 for operations)

        Returns:
            SignatureResult

        Raises:
            SignerUnavailableError: If the custodian has no signer for the curve
            EncodingError: If ``op`` or the raw signature is not valid hex
        """
        raw_signer = self._raw_signer()
        if raw_signer is None:
            raise SignerUnavailableError(self._curve)

        payload = _magic_byte_prefix(magic_byte) + _decode_hex(op, "operation")
        signature = _raw_signature_bytes(raw_signer.sign(digest(payload, PAYLOAD_DIGEST_SIZE)))

        result = SignatureResult(
            bytes=op,
            sig=b58c_encode(signature, GENERIC_SIGNATURE_PREFIX),
            prefix_sig=b58c_encode(signature, self._profile.signature_prefix),
            sbytes=op + signature.hex(),
        )
        logger.debug(f"Signed {len(payload)}-byte payload with {self._curve.value} signer")
        return result

    def public_key(self) -> str:
        """
        Get the encoded public key (edpk/sppk/p2pk).

        Raises:
            PublicKeyUnavailableError: If the custodian holds no key for the curve
        """
        return derive_public_key(self._curve, self._raw_public_key())

    def public_key_hash(self) -> str:
        """
        Get the address (tz1/tz2/tz3).

        Raises:
            AddressUnavailableError: If the custodian holds no key for the curve
        """
        return derive_address(self._curve, self._raw_public_key())

    def identity(self) -> EncodedIdentity:
        """Get the encoded public key and address from a single custodian lookup."""
        return derive_identity(self._curve, self._raw_public_key())

    def secret_key(self) -> Any:
        """Secret keys never leave the custodian."""
        raise SecretKeyProhibitedError()

    def _raw_signer(self) -> Optional[RawSigner]:
        return self._custodian.lookup_signer(self._profile.signer_capability_name)

    def _raw_public_key(self) -> Optional[bytes]:
        public_key = self._custodian.lookup_public_keys().get(self._profile.public_key_capability_name)
        if not public_key:
            return None
        return _decode_hex(public_key, "public key")

    def __repr__(self) -> str:
        return f"AcurastSigner(curve={self._curve.value!r}, custodian={self._custodian!r})"


__all__ = ["AcurastSigner", "SignatureResult"]
