"""Domain value objects for Pollexa."""

from pollexa.domain.value.identifiers import OptionId, PostId, UserId
from pollexa.domain.value.types import Asset

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "OptionId",
    # Types
    "Asset",
]
