"""Domain layer DI providers."""

from dishka import Scope, provide

from pollexa.domain.service import VoteService
from pollexa.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_vote_service(self) -> VoteService:
        """Provide vote domain service."""
        return VoteService()
