"""Application settings and configuration.

This module defines all configuration options for the blog client.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Blog Microservices", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Backend service base URLs
    user_service_url: str = Field(
        default="http://localhost:8001",
        alias="BLOG_USER_SERVICE_URL",
    )
    post_service_url: str = Field(
        default="http://localhost:8002",
        alias="BLOG_POST_SERVICE_URL",
    )
    comment_service_url: str = Field(
        default="http://localhost:8003",
        alias="BLOG_COMMENT_SERVICE_URL",
    )

    # None disables the timeout entirely
    http_timeout_seconds: float | None = Field(
        default=None,
        alias="BLOG_HTTP_TIMEOUT_SECONDS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()
