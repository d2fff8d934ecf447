"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NoCurrentUserError(BusinessRuleViolationError):
    """Raised when a vote is cast without an identified voter."""

    def __init__(self, post_id: str | None = None):
        self.post_id = post_id
        target = f" on post {post_id}" if post_id else ""
        super().__init__(f"Cannot vote{target}: no current user is set")


class InvalidStateTransitionError(DomainError):
    """Raised when the display state is moved along a disallowed edge."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Invalid state transition: {current} -> {target}")
