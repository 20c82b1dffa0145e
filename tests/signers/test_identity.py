"""
Identity derivation tests.
"""

import pytest

from acurast_signer.enums import Curve
from acurast_signer.codec.base58check import b58c_decode
from acurast_signer.crypto.hash_utils import digest
from acurast_signer.runtime.errors import PublicKeyUnavailableError, AddressUnavailableError
from acurast_signer.signers.identity import (
    EncodedIdentity,
    derive_address,
    derive_identity,
    derive_public_key,
)
from acurast_signer.signers.registry import profile_for

RAW_KEYS = {
    Curve.ED25519: bytes.fromhex("a70791af4337ff7987301e3ab643a103384294562d5bb4fabe4462de0e08d7b8"),
    Curve.SECP256K1: bytes.fromhex("03de4551776b52ee506bc7ee083cdee304008ead1084377d22dfa3262cf495dc90"),
    Curve.P256: bytes.fromhex("03070c7c8a6329d746c5a1de2fbcd5c6b7d6fa8df4e131e4d0828e2705a7d3bf92"),
}


def test_known_ed25519_identity():
    """Test the ED25519 identity of a fixed key."""
    identity = derive_identity(Curve.ED25519, RAW_KEYS[Curve.ED25519])

    assert identity == EncodedIdentity(
        public_key="edpkuunUy3Lib2tVJk9aTKo9dw5cqd2gyw3NYAmeBZVGsbmqbQr9Gy",
        address="tz1amh2ijBHuW3HegfoyaMXVXAFLqTiQ7aD8",
    )


@pytest.mark.parametrize("curve", list(Curve))
def test_address_decodes_to_key_hash(curve):
    """Test the address decodes to the address prefix and the 20-byte key hash."""
    raw_key = RAW_KEYS[curve]
    address = derive_address(curve, raw_key)

    assert b58c_decode(address, profile_for(curve).address_prefix) == (
        profile_for(curve).address_prefix,
        digest(raw_key, 20),
    )


@pytest.mark.parametrize("curve", list(Curve))
def test_public_key_decodes_to_raw_key(curve):
    """Test the public key decodes to the raw key."""
    version, payload = b58c_decode(derive_public_key(curve, RAW_KEYS[curve]))

    assert version == profile_for(curve).public_key_prefix
    assert payload == RAW_KEYS[curve]


@pytest.mark.parametrize("raw_key", [None, b""])
def test_absent_key(raw_key):
    """Test the two distinct failures for an absent key."""
    with pytest.raises(PublicKeyUnavailableError):
        derive_public_key(Curve.P256, raw_key)
    with pytest.raises(AddressUnavailableError):
        derive_address(Curve.P256, raw_key)
    with pytest.raises(PublicKeyUnavailableError):
        derive_identity(Curve.P256, raw_key)
