"""Configuration settings for the OpenSky API client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from opensky_api.models.parameters import Authentication

logger = logging.getLogger("opensky.config")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Client configuration loaded from environment variables."""

    api_base_url: str = os.getenv(
        "OPENSKY_API_BASE_URL", "https://opensky-network.org/api/"
    )
    timeout: float = float(os.getenv("OPENSKY_TIMEOUT", "10.0"))

    # Basic auth credentials; only used when passed explicitly to an operation
    username: str | None = os.getenv("OPENSKY_USERNAME")
    password: str | None = os.getenv("OPENSKY_PASSWORD")

    log_level: str = os.getenv("OPENSKY_LOG_LEVEL", "INFO")
    log_requests: bool = _get_bool("OPENSKY_LOG_REQUESTS")


settings = Settings()


def get_default_authentication() -> Authentication | None:
    """Build credentials from the configured username and password.

    Returns ``None`` when either value is missing so callers fall back to
    anonymous access.
    """

    if not settings.username or not settings.password:
        if settings.username or settings.password:
            logger.warning("Incomplete OpenSky credentials configured; using anonymous access")
        return None
    return Authentication(username=settings.username, password=settings.password)


def configure_logging(level: str | None = None) -> None:
    """Apply a basic logging configuration for scripts using the client."""

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    if settings.log_requests:
        logging.getLogger("opensky.endpoints").setLevel(logging.DEBUG)


__all__ = [
    "LOG_FORMAT",
    "Settings",
    "configure_logging",
    "get_default_authentication",
    "settings",
]
