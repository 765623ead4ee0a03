"""In-memory stand-ins for the user, post and comment services.

Useful for local development and end-to-end tests: each factory returns a
FastAPI app exposing the same ``/api/v1`` endpoints as the real service.
"""

from .services import create_comment_service, create_post_service, create_user_service
from .store import StubStore

__all__ = [
    "StubStore",
    "create_comment_service",
    "create_post_service",
    "create_user_service",
]
