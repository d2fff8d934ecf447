"""Application layer DI providers."""

from collections.abc import Iterator

from dishka import Scope, provide

from pollexa.application.feed import PostStore
from pollexa.config import Settings
from pollexa.domain.repository import PostProvider
from pollexa.domain.service import VoteService
from pollexa.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production view model provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_post_store(
        self,
        post_provider: PostProvider,
        vote_service: VoteService,
        settings: Settings,
    ) -> Iterator[PostStore]:
        """Provide a post store, one per owning view.

        Pending state transitions are cancelled when the scope closes.
        """
        store = PostStore(
            provider=post_provider,
            vote_service=vote_service,
            settling_delay=settings.feed.settling_delay,
            page_title=settings.feed.page_title,
        )
        yield store
        store.close()
