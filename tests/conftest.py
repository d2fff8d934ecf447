"""Test configuration and helper factories."""

from datetime import datetime, timezone
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from pollexa.domain.model import Option, Post, User, Vote
from pollexa.domain.value import Asset, OptionId, PostId, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(user_id: str = "1", username: str = "Pollexa") -> User:
    """Build a user with an avatar."""
    return User(id=UserId(user_id), username=username, image=Asset(name="avatar_6"))


def make_option(
    option_id: str | None = None,
    voted: int = 0,
    image_name: str = "post_1_option_1",
) -> Option:
    """Build an option; ids are random unless given."""
    return Option(
        id=OptionId(option_id or str(uuid4())),
        image=Asset(name=image_name),
        voted=voted,
    )


def make_post(
    post_id: str | None = None,
    options: Optional[Sequence[Option]] = None,
    user: Optional[User] = None,
    anonymous: bool = False,
    voted_bys: Optional[Sequence[Vote]] = None,
    content: str = "Test",
) -> Post:
    """Build a two-option post authored by ``user`` (or a default user).

    Pass ``anonymous=True`` for a post without an author.
    """
    return Post(
        id=PostId(post_id or str(uuid4())),
        created_at=datetime.now(timezone.utc),
        content=content,
        options=list(options) if options is not None else [make_option(), make_option()],
        user=None if anonymous else (user or make_user()),
        voted_bys=list(voted_bys or []),
    )


def make_sample_posts(count: int = 7) -> list[Post]:
    """Build ``count`` posts with deterministic ids."""
    return [
        make_post(
            post_id=f"post_{n}",
            options=[
                make_option(f"post_{n}_option_1", image_name=f"post_{n}_option_1"),
                make_option(f"post_{n}_option_2", image_name=f"post_{n}_option_2"),
            ],
            content=f"Poll number {n}",
        )
        for n in range(1, count + 1)
    ]
