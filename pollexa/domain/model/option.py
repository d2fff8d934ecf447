"""Option entity.

An option is one selectable choice of a post. Decoding an option is the
only validating path in the domain: its image must exist.
"""

from typing import Any

from pydantic import ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from pollexa.domain.model.common import DomainModel, asset_catalog_from
from pollexa.domain.value import Asset, OptionId

DATA_CORRUPTED = "data_corrupted"


class Option(DomainModel):
    """Option entity.

    Options are identified by ``id`` alone: two values with the same id
    compare equal even when their tallies differ.
    """

    id: OptionId
    image: Asset
    voted: int

    @model_validator(mode="before")
    @classmethod
    def resolve_image(cls, data: Any, info: ValidationInfo) -> Any:
        """Resolve ``image_name`` into an asset when decoding.

        A ready-made ``Asset`` is only accepted when built in code. Raw
        ``image`` payloads are dropped, so every decoded image goes through
        the catalog.
        """
        if not isinstance(data, dict):
            return data
        if isinstance(data.get("image"), Asset) and "image_name" not in data:
            return data

        data = dict(data)
        data.pop("image", None)
        image_name = data.pop("image_name", None)
        if image_name is None:
            # Let field validation report the missing image
            return data

        catalog = asset_catalog_from(info)
        image = catalog.resolve(image_name) if catalog is not None else None
        if image is None:
            raise PydanticCustomError(
                DATA_CORRUPTED,
                "An image with name {image_name} could not be loaded from the asset catalog",
                {"image_name": image_name},
            )
        data["image"] = image
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
