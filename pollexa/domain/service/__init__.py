"""Domain services."""

from .base import Service
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "Service",
    "VoteOutcome",
    "VoteService",
]
