"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Registration payload sent to the user service."""

    username: str = Field(..., description="Public handle")
    email: str = Field(..., description="Email address used for login lookup")
    full_name: str = Field(..., description="Display name; defaults to the username")
    bio: str = Field("", description="Free-form profile text")


class User(BaseModel):
    """User record returned by the user service."""

    id: int
    username: str
    email: str
    full_name: str | None = None
    bio: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")
