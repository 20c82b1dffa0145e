"""
Signer configuration.

Typed options for constructing an AcurastSigner.
"""

from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator

from ..enums import Curve


class SignerOptions(BaseModel):
    """
    Options for an AcurastSigner.

    The curve defaults to P256 (tz3), matching the custodian's default key.
    """
    curve: Curve = Field(default=Curve.P256, description="Curve of the custodian key to use")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("curve", mode="before")
    @classmethod
    def validate_curve(cls, v: Any) -> Curve:
        """Accept curve members, values or names in any case."""
        return Curve.parse(v)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"curve": self.curve.value}


__all__ = ["SignerOptions"]
