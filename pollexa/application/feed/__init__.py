"""Post list view model."""

from .cell import PostCellViewModel, build_cell_view_model, has_voted
from .post_store import PostStore
from .state import DisplayStateMachine, PostListState

__all__ = [
    "DisplayStateMachine",
    "PostCellViewModel",
    "PostListState",
    "PostStore",
    "build_cell_view_model",
    "has_voted",
]
