"""Post aggregate root.

A post is a poll: some text, the user who asked it, and the options
people vote on.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pollexa.domain.model.common import DomainModel
from pollexa.domain.model.option import Option
from pollexa.domain.model.user import User
from pollexa.domain.model.vote import Vote
from pollexa.domain.value import OptionId, PostId


class Post(DomainModel):
    """Post aggregate root.

    Only voting changes a post, and it does so by producing an updated copy
    with new option tallies, ``last_vote_at`` and an extra vote record.
    """

    id: PostId
    created_at: datetime
    content: str
    options: list[Option]
    user: Optional[User] = None
    last_vote_at: Optional[datetime] = None
    voted_bys: list[Vote] = Field(default_factory=list)

    @property
    def option_ids(self) -> set[OptionId]:
        """Ids of this post's current options."""
        return {option.id for option in self.options}

    @property
    def total_vote_count(self) -> int:
        """Sum of every option's tally."""
        return sum(option.voted for option in self.options)

    def find_option(self, option_id: OptionId) -> Optional[int]:
        """Return the index of the option with the given id, if present."""
        for index, option in enumerate(self.options):
            if option.id == option_id:
                return index
        return None
