"""Comment-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for creating a comment on a post."""

    content: str = Field(..., description="Comment text")
    post_id: int = Field(..., description="Post the comment belongs to")
    author_id: int = Field(..., description="ID of the session user")


class Comment(BaseModel):
    """Comment as returned by the comment service."""

    id: int
    content: str
    author_id: int
    post_id: int
    created_at: str

    model_config = ConfigDict(frozen=True, extra="ignore")
