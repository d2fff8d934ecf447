"""Strongly typed identifiers for Pollexa domain entities.

Identifiers come straight from the bundled dataset, so they are plain
strings rather than UUIDs.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
OptionId = NewType("OptionId", str)
