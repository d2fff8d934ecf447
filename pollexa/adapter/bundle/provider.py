"""Post providers backed by the bundled dataset."""

import asyncio
from pathlib import Path
from typing import Iterable

import logfire

from pollexa.adapter.bundle.decoder import PostDecoder
from pollexa.adapter.error import (
    ProviderError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from pollexa.domain.model import Post
from pollexa.domain.repository import AssetCatalog, PostProvider


class BundlePostProvider(PostProvider):
    """Reads posts from a JSON file shipped with the application."""

    def __init__(
        self, data_dir: Path, assets: AssetCatalog, file_name: str = "posts"
    ) -> None:
        """Initialize the provider.

        Args:
            data_dir: Directory holding the dataset
            assets: Catalog used to resolve images while decoding
            file_name: Dataset name, without the ``.json`` extension
        """
        self.data_dir = data_dir
        self.file_name = file_name
        self.decoder = PostDecoder(assets)

    @property
    def source(self) -> Path:
        """Full path of the dataset file."""
        return self.data_dir / f"{self.file_name}.json"

    async def fetch_all(self) -> list[Post]:
        """Read and decode every post in the dataset.

        Raises:
            SourceNotFoundError: If the dataset file does not exist
            SourceUnreadableError: If the file cannot be read
            PostDecodeError: If the content is not a valid list of posts
        """
        source = self.source
        with logfire.span("bundle_provider.fetch_all", source=str(source)):
            if not source.is_file():
                logfire.error("Posts file not found", source=str(source))
                raise SourceNotFoundError(str(source))

            try:
                payload = await asyncio.to_thread(source.read_bytes)
            except OSError as e:
                logfire.error(
                    "Posts file unreadable", source=str(source), error=str(e)
                )
                raise SourceUnreadableError(str(source), str(e)) from e

            posts = self.decoder.decode(payload)
            logfire.info("Posts decoded", source=str(source), count=len(posts))
            return posts


class MockPostProvider(PostProvider):
    """Post provider for testing.

    Returns the posts it was given, or fails on demand, without any I/O.
    """

    def __init__(self, posts: Iterable[Post] = (), should_fail: bool = False) -> None:
        self.posts = list(posts)
        self.should_fail = should_fail
        self.fetch_count = 0

    async def fetch_all(self) -> list[Post]:
        """Return the configured posts or raise a provider error."""
        self.fetch_count += 1
        if self.should_fail:
            raise ProviderError("Mock provider failure")
        return list(self.posts)
