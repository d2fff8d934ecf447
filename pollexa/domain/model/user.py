"""User entity."""

from typing import Any, Optional

from pydantic import ValidationInfo, model_validator

from pollexa.domain.model.common import DomainModel, asset_catalog_from
from pollexa.domain.value import Asset, UserId


class User(DomainModel):
    """Author of a post, and the voter when voting."""

    id: UserId
    username: str
    image: Optional[Asset] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_avatar(cls, data: Any, info: ValidationInfo) -> Any:
        """Resolve ``image_name`` into an avatar when decoding.

        The avatar is optional, so a name the catalog does not know
        leaves ``image`` unset instead of failing.
        """
        if not isinstance(data, dict) or "image_name" not in data:
            return data

        data = dict(data)
        image_name = data.pop("image_name")
        catalog = asset_catalog_from(info)
        if image_name and catalog is not None and "image" not in data:
            data["image"] = catalog.resolve(image_name)
        return data
