"""Minimal publish/subscribe primitives for view-model outputs.

Usage:
    publisher = Publisher(PostListState.LOADING, distinct=True)
    subscription = publisher.subscribe(lambda state: print(state))
    publisher.publish(PostListState.POSTS)
    subscription.cancel()
"""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Callback = Callable[[T], None]


class Subscription:
    """Handle returned by ``Publisher.subscribe``.

    Cancelling is idempotent; a cancelled subscriber receives nothing more.
    """

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self.cancelled = False

    def cancel(self) -> None:
        """Stop receiving values."""
        if self.cancelled:
            return
        self.cancelled = True
        self._cancel()


class Publisher(Generic[T]):
    """Holds a current value and pushes changes to subscribers.

    Subscribers are called synchronously, in subscription order. With
    ``distinct=True`` a value equal to the current one is not published.
    """

    def __init__(self, initial: T, distinct: bool = False) -> None:
        self._value = initial
        self._distinct = distinct
        self._subscribers: dict[int, Callback[T]] = {}
        self._next_token = 0

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    @property
    def subscriber_count(self) -> int:
        """Number of active subscribers."""
        return len(self._subscribers)

    def publish(self, value: T) -> bool:
        """Set a new value and notify subscribers.

        Returns:
            True if subscribers were notified
        """
        if self._distinct and value == self._value:
            return False
        self._value = value
        for callback in list(self._subscribers.values()):
            callback(value)
        return True

    def subscribe(self, callback: Callback[T], replay: bool = True) -> Subscription:
        """Register a callback.

        Args:
            callback: Called with each published value
            replay: Deliver the current value immediately

        Returns:
            Subscription that unregisters the callback when cancelled
        """
        token = self._next_token
        self._next_token += 1
        self._subscribers[token] = callback

        if replay:
            callback(self._value)

        return Subscription(lambda: self._subscribers.pop(token, None))
