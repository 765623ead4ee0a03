"""Logging bootstrap for command-line entry points."""

from __future__ import annotations

import logging

from blog_client.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once, honouring ``settings.log_level``."""
    resolved = (level or settings.log_level).upper()
    if settings.debug:
        resolved = "DEBUG"
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if resolved == "DEBUG" else logging.WARNING
    )
