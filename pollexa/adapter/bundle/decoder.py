"""Decoding of the bundled posts payload.

The payload is a JSON list of post records with snake_case keys and
ISO-8601 timestamps. Image names are resolved through an asset catalog
while decoding.
"""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from pollexa.adapter.error import DataCorruptedError, PostDecodeError
from pollexa.domain.model import Post
from pollexa.domain.model.common import ASSETS_CONTEXT_KEY
from pollexa.domain.model.option import DATA_CORRUPTED
from pollexa.domain.repository import AssetCatalog

_POSTS_ADAPTER = TypeAdapter(list[Post])


class PostDecoder:
    """Decodes the posts payload into domain models."""

    def __init__(self, assets: AssetCatalog) -> None:
        """Initialize decoder.

        Args:
            assets: Catalog used to resolve option images and avatars
        """
        self.assets = assets

    def decode(self, payload: bytes | str) -> list[Post]:
        """Decode a JSON payload.

        Args:
            payload: Raw JSON document

        Returns:
            Decoded posts, in payload order

        Raises:
            DataCorruptedError: If an option image cannot be resolved
            PostDecodeError: If the payload is not a valid list of posts
        """
        try:
            return _POSTS_ADAPTER.validate_json(
                payload, context={ASSETS_CONTEXT_KEY: self.assets}
            )
        except ValidationError as e:
            raise self._translate(e) from e

    @staticmethod
    def _translate(error: ValidationError) -> PostDecodeError:
        """Map a pydantic validation error onto the provider error taxonomy."""
        for detail in error.errors():
            if detail["type"] == DATA_CORRUPTED:
                ctx: dict[str, Any] = detail.get("ctx") or {}
                return DataCorruptedError(
                    asset_name=str(ctx.get("image_name", "")),
                    coding_path=(*detail["loc"], "image_name"),
                )
        return PostDecodeError(
            f"Could not decode posts ({error.error_count()} errors): {error}"
        )
