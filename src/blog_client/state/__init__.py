"""State containers owned by the ``BlogApp`` orchestrator."""

from .comments import CommentThread
from .posts import PostCollection
from .session import SessionState
from .ui import Action, Modal, UiState

__all__ = [
    "Action",
    "CommentThread",
    "Modal",
    "PostCollection",
    "SessionState",
    "UiState",
]
