"""Cell view models for the post list.

A cell view model is a read-only projection of a post, rebuilt from the
post collection whenever it changes.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict

from pollexa.domain.model import Option, Post, User, Vote
from pollexa.domain.value import Asset

MISSING_USERNAME = "-"

_TIME_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
)


class PostCellViewModel(BaseModel):
    """Render-ready data for one post cell."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str  # Mirrors the post id for stable diffing
    title: str
    username: str
    avatar: Optional[Asset] = None
    date: datetime
    last_voted_date: Optional[datetime] = None
    total_vote_count: int
    options: list[Option]
    is_voted: bool
    current_user: Optional[User] = None
    voted_users: list[Vote]

    def option_percentages(self) -> list[int]:
        """Whole-number share of the votes for each option."""
        return [vote_percentage(o.voted, self.total_vote_count) for o in self.options]

    def relative_date(self, now: datetime | None = None) -> str:
        """Age of the post, e.g. ``"3 days ago"``."""
        return time_ago(self.date, now)

    @property
    def total_votes_label(self) -> str:
        noun = "Vote" if self.total_vote_count == 1 else "Votes"
        return f"{self.total_vote_count} Total {noun}"


def has_voted(post: Post) -> bool:
    """Whether any vote record on the post targets one of its options."""
    option_ids = post.option_ids
    return any(
        vote.post_id == post.id and vote.selected_option.id in option_ids
        for vote in post.voted_bys
    )


def build_cell_view_model(
    post: Post, current_user: Optional[User] = None
) -> PostCellViewModel:
    """Project a post onto its cell view model."""
    return PostCellViewModel(
        id=post.id,
        title=post.content,
        username=post.user.username if post.user else MISSING_USERNAME,
        avatar=post.user.image if post.user else None,
        date=post.created_at,
        last_voted_date=post.last_vote_at,
        total_vote_count=post.total_vote_count,
        options=list(post.options),
        is_voted=has_voted(post),
        current_user=current_user,
        voted_users=list(post.voted_bys),
    )


def vote_percentage(count: int, total: int) -> int:
    """Rounded percentage of ``count`` in ``total`` (0 when there are no votes)."""
    if total <= 0:
        return 0
    return round(count * 100 / total)


def time_ago(moment: datetime, now: datetime | None = None) -> str:
    """Describe how long ago ``moment`` was, in the largest whole unit."""
    if now is None:
        now = datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - moment).total_seconds())
    for unit, size in _TIME_UNITS:
        amount = seconds // size
        if amount >= 1:
            return f"{amount} {unit}{'' if amount == 1 else 's'} ago"
    return "just now"


def active_polls_title(count: int) -> str:
    """Header text for the number of polls in the list."""
    return f"{count} Active Polls"
