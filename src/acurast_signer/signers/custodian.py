r"""
Custodian interface for the Acurast Tezos signer.

The custodian is the host component that holds private keys and performs the
raw signing. The signer only looks up capabilities through this interface.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)

RawSignature = Union[bytes, str]


class RawSigner(ABC):
    """Raw signing capability exposed by the custodian for one curve."""

    @abstractmethod
    def sign(self, payload: bytes) -> RawSignature:
        """
        Sign a payload.

        Args:
            payload: Bytes to sign (the signer passes a 32-byte digest)

        Returns:
            Raw signature as bytes, or as a hex string
        """
        pass


class FunctionRawSigner(RawSigner):
    """Adapter turning a plain callable into a RawSigner."""

    def __init__(self, func: Callable[[bytes], RawSignature]):
        self._func = func

    def sign(self, payload: bytes) -> RawSignature:
        return self._func(payload)

    def __repr__(self) -> str:
        return f"FunctionRawSigner({getattr(self._func, '__name__', self._func)!r})"


class Custodian(ABC):
    """
    Abstract custodian interface.

    Signers are looked up by capability name (``ed25519``, ``secp256k1``,
    ``secp256r1``); public keys are returned as a mapping from curve
    identifier (``ed25519``, ``secp256k1``, ``p256``) to hex.
    """

    @abstractmethod
    def lookup_signer(self, name: str) -> Optional[RawSigner]:
        """
        Look up a raw signer by capability name.

        Returns:
            The raw signer, or None if none is registered
        """
        pass

    @abstractmethod
    def lookup_public_keys(self) -> Mapping[str, str]:
        """
        Get the hex-encoded raw public keys held by the custodian.

        Returns:
            Mapping containing only the curves the custodian holds
        """
        pass


class StaticCustodian(Custodian):
    """
    In-memory custodian.

    Serves a fixed set of signers and public keys; used for tests and for
    embedding the signer outside an Acurast job.
    """

    def __init__(self,
                 signers: Optional[Mapping[str, Union[RawSigner, Callable[[bytes], RawSignature]]]] = None,
                 public_keys: Optional[Mapping[str, Union[str, bytes]]] = None):
        """
        Initialize the custodian.

        Args:
            signers: Raw signers (or callables) by capability name
            public_keys: Raw public keys (hex or bytes) by curve identifier
        """
        self._signers: Dict[str, RawSigner] = {}
        self._public_keys: Dict[str, str] = {}

        for name, signer in (signers or {}).items():
            self.register_signer(name, signer)
        for name, public_key in (public_keys or {}).items():
            self.register_public_key(name, public_key)

    def register_signer(self, name: str, signer: Union[RawSigner, Callable[[bytes], RawSignature]]) -> None:
        """Register a raw signer under a capability name."""
        if not isinstance(signer, RawSigner):
            if not callable(signer):
                raise TypeError(f"Signer for {name!r} must be a RawSigner or callable")
            signer = FunctionRawSigner(signer)
        self._signers[name] = signer
        logger.debug(f"Registered raw signer {name}")

    def register_public_key(self, name: str, public_key: Union[str, bytes]) -> None:
        """Register a raw public key (hex or bytes) under a curve identifier."""
        if isinstance(public_key, (bytes, bytearray)):
            public_key = bytes(public_key).hex()
        self._public_keys[name] = public_key
        logger.debug(f"Registered public key {name}")

    def lookup_signer(self, name: str) -> Optional[RawSigner]:
        return self._signers.get(name)

    def lookup_public_keys(self) -> Mapping[str, str]:
        return dict(self._public_keys)

    def __repr__(self) -> str:
        return f"StaticCustodian(signers={sorted(self._signers)}, public_keys={sorted(self._public_keys)})"


__all__ = ["RawSigner", "FunctionRawSigner", "Custodian", "StaticCustodian", "RawSignature"]
