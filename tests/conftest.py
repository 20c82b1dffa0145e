"""
Test bootstrap:
- Add src/ to sys.path so the tests run without an installed package
- Provide the mock custodian used throughout the signer tests
"""
import sys
import hashlib
import pathlib
import pytest

SRC = pathlib.Path(__file__).resolve().parent.parent / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


MOCK_PUBLIC_KEYS = {
    "p256": "03070c7c8a6329d746c5a1de2fbcd5c6b7d6fa8df4e131e4d0828e2705a7d3bf92",
    "secp256k1": "03de4551776b52ee506bc7ee083cdee304008ead1084377d22dfa3262cf495dc90",
    "ed25519": "a70791af4337ff7987301e3ab643a103384294562d5bb4fabe4462de0e08d7b8",
}

OPERATION = "76afc9c804bd39aa52cd9bb0b770eb71d8c6f3ad5d2511ce2d86f25dde5d277e"


def mock_raw_sign(payload):
    """Deterministic stand-in for a raw signer: hex BLAKE2b-512 of the payload."""
    data = bytes.fromhex(payload) if isinstance(payload, str) else payload
    return hashlib.blake2b(data, digest_size=64).hexdigest()


@pytest.fixture
def operation():
    """Operation hex shared by the signing tests."""
    return OPERATION


@pytest.fixture
def mock_custodian():
    """Custodian holding a key for every curve and a signer for every capability."""
    from acurast_signer.signers.custodian import StaticCustodian

    return StaticCustodian(
        signers={
            "secp256r1": mock_raw_sign,
            "secp256k1": mock_raw_sign,
            "ed25519": mock_raw_sign,
        },
        public_keys=MOCK_PUBLIC_KEYS,
    )


@pytest.fixture
def empty_custodian():
    """Custodian with no keys and no signers."""
    from acurast_signer.signers.custodian import StaticCustodian

    return StaticCustodian()
