"""Backend service access for the blog client."""

from .client import (
    BlogServiceError,
    CommentCreateFailed,
    CommentsUnavailable,
    PostCreateFailed,
    PostDeleteFailed,
    PostsUnavailable,
    RegistrationFailed,
    Service,
    ServiceClient,
    ServiceConfig,
    UserNotFound,
    load_service_config,
)

__all__ = [
    "BlogServiceError",
    "CommentCreateFailed",
    "CommentsUnavailable",
    "PostCreateFailed",
    "PostDeleteFailed",
    "PostsUnavailable",
    "RegistrationFailed",
    "Service",
    "ServiceClient",
    "ServiceConfig",
    "UserNotFound",
    "load_service_config",
]
