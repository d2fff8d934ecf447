"""Vote domain service."""

from datetime import datetime, timezone
from typing import NamedTuple, Optional

import logfire

from pollexa.domain.model import Option, Post, User, Vote

from .base import Service


class VoteOutcome(NamedTuple):
    """Result of applying a vote to a post."""

    post: Post
    vote: Vote


class VoteService(Service):
    """Domain service for vote operations."""

    def cast_vote(
        self, post: Post, option: Option, voter: User
    ) -> Optional[VoteOutcome]:
        """Cast a vote on one option of a post.

        Increments the matching option by one, stamps the vote time and
        attaches a vote record. The record keeps the post's option as it was
        right before the increment.

        Args:
            post: Post being voted on
            option: Option chosen by the voter (matched by id)
            voter: User casting the vote

        Returns:
            Updated post and the new vote record, or None if the option
            does not belong to the post
        """
        with logfire.span(
            "vote_service.cast_vote",
            post_id=post.id,
            option_id=option.id,
            user_id=voter.id,
        ):
            option_index = post.find_option(option.id)
            if option_index is None:
                logfire.warn(
                    "Vote on option not in post", post_id=post.id, option_id=option.id
                )
                return None

            current = post.options[option_index]
            options = list(post.options)
            options[option_index] = current.model_copy(
                update={"voted": current.voted + 1}
            )

            vote = Vote(user=voter, post_id=post.id, selected_option=current)
            updated_post = post.model_copy(
                update={
                    "options": options,
                    "last_vote_at": datetime.now(timezone.utc),
                    "voted_bys": [*post.voted_bys, vote],
                }
            )

            logfire.info(
                "Vote cast",
                post_id=post.id,
                option_id=option.id,
                new_count=options[option_index].voted,
            )
            return VoteOutcome(post=updated_post, vote=vote)
