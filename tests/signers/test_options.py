"""
SignerOptions tests.
"""

import pytest
from pydantic import ValidationError

from acurast_signer.enums import Curve
from acurast_signer.signers.options import SignerOptions


def test_default_curve():
    """Test P256 is the default."""
    assert SignerOptions().curve == Curve.P256


@pytest.mark.parametrize("value, expected", [
    (Curve.ED25519, Curve.ED25519),
    ("ed25519", Curve.ED25519),
    ("SECP256K1", Curve.SECP256K1),
    (" p256 ", Curve.P256),
])
def test_curve_parsing(value, expected):
    """Test curves given as members, values or names."""
    assert SignerOptions(curve=value).curve == expected


def test_unknown_curve():
    """Test unknown curves are rejected."""
    with pytest.raises(ValidationError):
        SignerOptions(curve="secp384r1")


def test_to_dict():
    """Test dictionary conversion."""
    assert SignerOptions(curve="ed25519").to_dict() == {"curve": "ed25519"}


def test_frozen():
    """Test options are immutable."""
    options = SignerOptions()
    with pytest.raises(ValidationError):
        options.curve = Curve.ED25519
