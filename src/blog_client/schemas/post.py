# src/blog_client/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., description="Post headline")
    content: str = Field(..., description="Post body")
    author_id: int = Field(..., description="ID of the session user creating the post")


class Post(BaseModel):
    """Post as returned by the post service.

    ``created_at`` is kept as the server sent it (an ISO date or datetime).
    """

    id: int
    title: str
    content: str
    author_id: int
    created_at: str

    model_config = ConfigDict(frozen=True, extra="ignore")
