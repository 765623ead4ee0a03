# src/blog_client/schemas/__init__.py
"""
Pydantic schemas for the blog services' request/response bodies.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import Comment, CommentCreate
from .post import Post, PostCreate
from .user import User, UserCreate

__all__ = [
    "Comment", "CommentCreate",
    "Post", "PostCreate",
    "User", "UserCreate",
]
