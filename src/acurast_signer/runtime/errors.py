"""
Acurast Signer Error Model

This module provides the error handling framework for the signer. Every
failure is raised to the immediate caller; nothing here is retried.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for signer failures."""

    UNKNOWN = 1

    # Custodian errors (100-199)
    SIGNER_NOT_FOUND = 100
    PUBLIC_KEY_UNAVAILABLE = 101
    ADDRESS_UNAVAILABLE = 102
    PROHIBITED_ACTION = 103

    # Encoding errors (200-299)
    ENCODING_ERROR = 200
    INVALID_CHECKSUM = 201
    INVALID_PREFIX = 202


class SignerError(Exception):
    """
    Base class for all signer errors.

    Carries a code, optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a signer error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "name": type(self).__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class SignerUnavailableError(SignerError):
    """The custodian has no raw signer registered for the curve."""

    def __init__(self, curve: str, cause: Optional[Exception] = None):
        curve = getattr(curve, "value", curve)
        super().__init__(f"Signer {curve} not found", ErrorCode.SIGNER_NOT_FOUND,
                         {"curve": curve}, cause)
        self.curve = curve


class PublicKeyUnavailableError(SignerError):
    """The custodian holds no public key for the curve."""

    def __init__(self, message: str = "Unable to retrieve Public Key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.PUBLIC_KEY_UNAVAILABLE, details, cause)


class AddressUnavailableError(SignerError):
    """The address cannot be derived because the public key is missing."""

    def __init__(self, message: str = "Unable to retrieve Public Key Hash",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ADDRESS_UNAVAILABLE, details, cause)


class SecretKeyProhibitedError(SignerError):
    """Secret key material is never exposed."""

    def __init__(self, message: str = "Secret key cannot be exposed"):
        super().__init__(message, ErrorCode.PROHIBITED_ACTION)


class EncodingError(SignerError):
    """Data encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ChecksumError(EncodingError):
    """Base58check checksum mismatch."""

    def __init__(self, message: str = "Invalid base58check checksum",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_CHECKSUM, details, cause)


class InvalidPrefixError(EncodingError):
    """Version prefix is unknown or not the expected one."""

    def __init__(self, message: str = "Invalid version prefix",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_PREFIX, details, cause)


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
