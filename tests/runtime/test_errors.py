"""
Error model tests.
"""

import pytest

from acurast_signer.enums import Curve
from acurast_signer.runtime.errors import (
    ErrorCode,
    SignerError,
    SignerUnavailableError,
    PublicKeyUnavailableError,
    AddressUnavailableError,
    SecretKeyProhibitedError,
    EncodingError,
    ChecksumError,
    InvalidPrefixError,
)


@pytest.mark.parametrize("error, code, message", [
    (SignerUnavailableError(Curve.ED25519), ErrorCode.SIGNER_NOT_FOUND, "Signer ed25519 not found"),
    (PublicKeyUnavailableError(), ErrorCode.PUBLIC_KEY_UNAVAILABLE, "Unable to retrieve Public Key"),
    (AddressUnavailableError(), ErrorCode.ADDRESS_UNAVAILABLE, "Unable to retrieve Public Key Hash"),
    (SecretKeyProhibitedError(), ErrorCode.PROHIBITED_ACTION, "Secret key cannot be exposed"),
    (ChecksumError(), ErrorCode.INVALID_CHECKSUM, "Invalid base58check checksum"),
    (InvalidPrefixError(), ErrorCode.INVALID_PREFIX, "Invalid version prefix"),
])
def test_error_codes_and_messages(error, code, message):
    """Test each error kind's code and default message."""
    assert isinstance(error, SignerError)
    assert error.code == code
    assert error.message == message
    assert str(error).startswith(f"[{code.name}] {message}")


def test_signer_unavailable_carries_curve():
    """Test the curve is kept as its string value."""
    error = SignerUnavailableError(Curve.SECP256K1)
    assert error.curve == "secp256k1"
    assert error.details == {"curve": "secp256k1"}

    assert SignerUnavailableError("p256").curve == "p256"


def test_distinct_kinds():
    """Test the public key and address failures are not interchangeable."""
    assert not isinstance(PublicKeyUnavailableError(), AddressUnavailableError)
    assert not isinstance(AddressUnavailableError(), PublicKeyUnavailableError)


def test_codec_errors_are_encoding_errors():
    """Test the codec error hierarchy."""
    assert isinstance(ChecksumError(), EncodingError)
    assert isinstance(InvalidPrefixError(), EncodingError)


def test_to_dict_with_cause():
    """Test dictionary conversion including the cause."""
    cause = ValueError("bad hex")
    error = EncodingError("Invalid operation hex", cause=cause)

    assert error.to_dict() == {
        "code": ErrorCode.ENCODING_ERROR.value,
        "name": "EncodingError",
        "message": "Invalid operation hex",
        "cause": "bad hex",
    }
    assert "Caused by: bad hex" in str(error)
