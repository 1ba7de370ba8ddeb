#!/usr/bin/env python3
"""
Runtime settings for the Podcast Explorer
Values come from the environment (optionally a .env file loaded by main.py)
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://podcast-api.netlify.app"
DEFAULT_PAGE_SIZE = 12
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 1.0
DEFAULT_TIMEOUT = 30.0

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the explorer configuration"""
    api_url: str = DEFAULT_API_URL
    page_size: int = DEFAULT_PAGE_SIZE
    fetch_max_attempts: int = DEFAULT_MAX_ATTEMPTS
    fetch_base_delay: float = DEFAULT_BASE_DELAY
    fetch_timeout: float = DEFAULT_TIMEOUT
    debug: bool = False
    log_level: str = "INFO"
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = int(raw)
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def _non_negative_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = float(raw)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def get_settings() -> Settings:
    """
    Build Settings from environment variables.

    Raises:
        ValueError: a numeric variable is malformed or out of range
    """
    debug = os.getenv("DEBUG", "false").lower() == "true"

    origins = list(DEFAULT_ORIGINS)
    env_origins = os.getenv("ALLOWED_ORIGINS", "")
    if env_origins:
        origins.extend([origin.strip() for origin in env_origins.split(",") if origin.strip()])

    settings = Settings(
        api_url=os.getenv("PODCAST_API_URL", DEFAULT_API_URL).rstrip("/"),
        page_size=_positive_int("PAGE_SIZE", DEFAULT_PAGE_SIZE),
        fetch_max_attempts=_positive_int("FETCH_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        fetch_base_delay=_non_negative_float("FETCH_BASE_DELAY", DEFAULT_BASE_DELAY),
        fetch_timeout=_non_negative_float("FETCH_TIMEOUT", DEFAULT_TIMEOUT),
        debug=debug,
        log_level="DEBUG" if debug else os.getenv("LOG_LEVEL", "INFO").upper(),
        allowed_origins=origins,
    )

    if debug:
        logger.debug(f"🔍 Settings loaded: {settings}")
    return settings
