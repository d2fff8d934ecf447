"""Display state of the post list."""

from enum import Enum

from pollexa.domain.error import InvalidStateTransitionError


class PostListState(str, Enum):
    """What the post list should currently show."""

    INITIALIZED = "initialized"
    LOADING = "loading"  # Placeholder cells
    EMPTY = "empty"  # Empty state
    POSTS = "posts"
    REFRESHING = "refreshing"  # Refresh control
    LOADING_NEXT_PAGE = "loading_next_page"  # Reserved for pagination


_TRANSITIONS: dict[PostListState, frozenset[PostListState]] = {
    PostListState.INITIALIZED: frozenset({PostListState.LOADING}),
    PostListState.LOADING: frozenset({PostListState.POSTS, PostListState.EMPTY}),
    PostListState.POSTS: frozenset({PostListState.REFRESHING, PostListState.LOADING}),
    PostListState.EMPTY: frozenset({PostListState.REFRESHING, PostListState.LOADING}),
    PostListState.REFRESHING: frozenset({PostListState.POSTS, PostListState.EMPTY}),
    PostListState.LOADING_NEXT_PAGE: frozenset(),
}


class DisplayStateMachine:
    """Tracks the display state and guards its transitions.

    Any state may move to ``LOADING_NEXT_PAGE``; nothing leaves it.
    Re-entering the current state is accepted and changes nothing.
    """

    def __init__(self, initial: PostListState = PostListState.INITIALIZED) -> None:
        self._state = initial

    @property
    def state(self) -> PostListState:
        return self._state

    def can_transition(self, target: PostListState) -> bool:
        """Whether ``target`` is reachable from the current state."""
        if target == self._state:
            return True
        if target == PostListState.LOADING_NEXT_PAGE:
            return True
        return target in _TRANSITIONS[self._state]

    def transition(self, target: PostListState) -> bool:
        """Move to ``target``.

        Returns:
            True if the state changed, False if it already was ``target``

        Raises:
            InvalidStateTransitionError: If the edge is not allowed
        """
        if not self.can_transition(target):
            raise InvalidStateTransitionError(self._state.value, target.value)
        if target == self._state:
            return False
        self._state = target
        return True

    @staticmethod
    def settled(has_posts: bool) -> PostListState:
        """State a finished load settles on."""
        return PostListState.POSTS if has_posts else PostListState.EMPTY
