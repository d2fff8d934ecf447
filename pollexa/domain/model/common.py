"""Base model for all domain entities."""

from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo

if TYPE_CHECKING:
    from pollexa.domain.repository.asset import AssetCatalog

ASSETS_CONTEXT_KEY = "assets"


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def asset_catalog_from(info: ValidationInfo) -> Optional["AssetCatalog"]:
    """Return the asset catalog passed as validation context, if any."""
    context: Any = info.context
    if not isinstance(context, dict):
        return None
    return context.get(ASSETS_CONTEXT_KEY)
