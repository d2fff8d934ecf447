"""Domain value objects for Pollexa."""

from pathlib import Path

from pydantic import field_validator

from pollexa.domain.value.common import ValueObject


class Asset(ValueObject):
    """A resolved image asset.

    Produced by an asset catalog; holding an Asset means the image
    was found when the record was decoded.
    """

    name: str
    path: Path | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate asset name is not empty."""
        if not v:
            raise ValueError("Asset name must not be empty")
        return v

    def __str__(self) -> str:
        return self.name
