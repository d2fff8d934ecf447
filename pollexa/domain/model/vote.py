"""Vote entity.

A vote records that a user picked an option on a post. The selected option
is stored by value, as it was when the vote was cast.
"""

from typing import Optional

from pollexa.domain.model.common import DomainModel
from pollexa.domain.model.option import Option
from pollexa.domain.model.user import User
from pollexa.domain.value import PostId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - ``post_id`` is set once the record is attached to a post
    - the selected option must be one of that post's options
    - nothing here stops a user from voting twice
    """

    user: User
    post_id: Optional[PostId] = None
    selected_option: Option
