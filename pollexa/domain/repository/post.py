"""Post provider interface."""

from abc import ABC, abstractmethod
from typing import List

from pollexa.domain.model.post import Post


class PostProvider(ABC):
    """Source of the full post collection.

    Defines the contract the feed relies on. A fetch is single-shot and is
    never retried by the caller.
    """

    @abstractmethod
    async def fetch_all(self) -> List[Post]:
        """Fetch every post.

        Returns:
            All posts, in display order

        Raises:
            ProviderError: If the source is missing, unreadable or cannot
                be decoded
        """
        pass
