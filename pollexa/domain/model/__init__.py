"""Domain model entities for Pollexa."""

from pollexa.domain.model.option import Option
from pollexa.domain.model.post import Post
from pollexa.domain.model.user import User
from pollexa.domain.model.vote import Vote

__all__ = [
    "User",
    "Option",
    "Post",
    "Vote",
]
