"""Post store: the view model behind the post list.

The store owns the post collection and the current user, derives cell view
models from them, applies votes and drives the display state. Everything
runs on one event loop; the provider fetch is the only suspension point.
"""

import asyncio
from typing import Optional, Union

import logfire

from pollexa.adapter.error import ProviderError
from pollexa.application.feed.cell import (
    PostCellViewModel,
    active_polls_title,
    build_cell_view_model,
)
from pollexa.application.feed.state import DisplayStateMachine, PostListState
from pollexa.domain.error import NoCurrentUserError
from pollexa.domain.model import Option, Post, User, Vote
from pollexa.domain.repository import PostProvider
from pollexa.domain.service import VoteService
from pollexa.util.observable import Callback, Publisher, Subscription

DEFAULT_SETTLING_DELAY = 2.5
DEFAULT_PAGE_TITLE = "Discover"

PostTarget = Union[int, str]


class PostStore:
    """View model for a list of polls.

    Outputs (``state``, ``cells``, ``current_user``) are read-only and can be
    observed through the ``subscribe_*`` methods. The state publisher only
    notifies on actual changes; cells and current user re-publish on every
    rebuild.
    """

    def __init__(
        self,
        provider: PostProvider,
        vote_service: Optional[VoteService] = None,
        settling_delay: float = DEFAULT_SETTLING_DELAY,
        page_title: str = DEFAULT_PAGE_TITLE,
    ) -> None:
        """Initialize the store and enter the loading state.

        Args:
            provider: Source of the post collection
            vote_service: Applies votes to posts
            settling_delay: Seconds between a finished load and the state
                change revealing it; 0 settles immediately
            page_title: Title of the page showing the list
        """
        if settling_delay < 0:
            raise ValueError("settling_delay must be >= 0")

        self.provider = provider
        self.vote_service = vote_service or VoteService()
        self.settling_delay = settling_delay
        self.page_title = page_title

        self._posts: list[Post] = []
        self._machine = DisplayStateMachine()
        self._state = Publisher(self._machine.state, distinct=True)
        self._cells: Publisher[list[PostCellViewModel]] = Publisher([])
        self._current_user: Publisher[Optional[User]] = Publisher(None)
        self._pending: set[asyncio.TimerHandle] = set()

        self._set_state(PostListState.LOADING)

    # Outputs

    @property
    def state(self) -> PostListState:
        return self._state.value

    @property
    def cells(self) -> list[PostCellViewModel]:
        return list(self._cells.value)

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user.value

    @property
    def posts(self) -> list[Post]:
        return list(self._posts)

    @property
    def active_polls_title(self) -> str:
        return active_polls_title(len(self._cells.value))

    def subscribe_state(self, callback: Callback[PostListState]) -> Subscription:
        """Observe display state changes (distinct values only)."""
        return self._state.subscribe(callback)

    def subscribe_cells(
        self, callback: Callback[list[PostCellViewModel]]
    ) -> Subscription:
        """Observe every rebuild of the cell view models."""
        return self._cells.subscribe(callback)

    def subscribe_current_user(
        self, callback: Callback[Optional[User]]
    ) -> Subscription:
        """Observe the current user."""
        return self._current_user.subscribe(callback)

    # Commands

    async def load(self) -> None:
        """Fetch the full post collection from the provider.

        On failure the collection is left as it was and the store settles
        on the empty state. Nothing is retried.
        """
        with logfire.span("post_store.load", state=self.state.value):
            if self.state != PostListState.REFRESHING:
                self._set_state(PostListState.LOADING)

            try:
                posts = await self.provider.fetch_all()
            except ProviderError as e:
                logfire.error(
                    "Error loading posts", error=str(e), error_type=type(e).__name__
                )
                self._schedule_settle(failed=True)
                return

            self._posts = list(posts)
            self._current_user.publish(self._posts[0].user if self._posts else None)
            self._rebuild_cells()
            logfire.info(
                "Posts loaded",
                count=len(self._posts),
                current_user=self.current_user.id if self.current_user else None,
            )
            self._schedule_settle()

    async def refresh(self) -> None:
        """Reload the posts on user request (pull-to-refresh)."""
        if self.state not in (PostListState.POSTS, PostListState.EMPTY):
            logfire.warn("Refresh ignored", state=self.state.value)
            return

        self._set_state(PostListState.REFRESHING)
        await self.load()

    def load_next_page(self) -> None:
        """Enter the next-page state. Pagination is not supported yet."""
        logfire.info("Next page requested", state=self.state.value)
        self._set_state(PostListState.LOADING_NEXT_PAGE)

    def vote(
        self, option: Option, target: PostTarget, voter: Optional[User] = None
    ) -> Optional[Vote]:
        """Vote for an option of a post and rebuild the cells.

        Args:
            option: Option to vote for (matched by id)
            target: Position of the post in the list, or its id
            voter: User casting the vote; defaults to the current user

        Returns:
            The new vote record, or None if the post or option could not
            be found

        Raises:
            NoCurrentUserError: If no voter is given and no current user is set
        """
        with logfire.span(
            "post_store.vote", target=str(target), option_id=option.id
        ):
            voter = voter or self.current_user
            if voter is None:
                raise NoCurrentUserError(
                    target if isinstance(target, str) else None
                )

            index = self._post_index(target)
            if index is None:
                logfire.warn("Vote on unknown post", target=str(target))
                return None

            outcome = self.vote_service.cast_vote(self._posts[index], option, voter)
            if outcome is None:
                return None

            self._posts[index] = outcome.post
            self._rebuild_cells()
            return outcome.vote

    def close(self) -> None:
        """Cancel pending state transitions."""
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()

    # Internals

    def _post_index(self, target: PostTarget) -> Optional[int]:
        """Resolve a position or post id to an index into the collection."""
        if isinstance(target, bool):
            return None
        if isinstance(target, int):
            return target if 0 <= target < len(self._posts) else None
        for index, post in enumerate(self._posts):
            if post.id == target:
                return index
        return None

    def _rebuild_cells(self) -> None:
        current_user = self.current_user
        self._cells.publish(
            [build_cell_view_model(post, current_user) for post in self._posts]
        )

    def _set_state(self, target: PostListState) -> None:
        if self._machine.transition(target):
            self._state.publish(target)

    def _schedule_settle(self, failed: bool = False) -> None:
        """Reveal the load result once the settling delay has passed."""
        if self.settling_delay == 0:
            self._settle(failed)
            return

        loop = asyncio.get_running_loop()
        handle: Optional[asyncio.TimerHandle] = None

        def fire() -> None:
            self._pending.discard(handle)
            self._settle(failed)

        handle = loop.call_later(self.settling_delay, fire)
        self._pending.add(handle)

    def _settle(self, failed: bool) -> None:
        has_posts = not failed and bool(self._cells.value)
        target = self._machine.settled(has_posts)
        if not self._machine.can_transition(target):
            logfire.warn(
                "Settle skipped", state=self.state.value, target=target.value
            )
            return
        self._set_state(target)
