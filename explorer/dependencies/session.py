#!/usr/bin/env python3
"""
Session dependencies for FastAPI dependency injection.

The explorer serves a single browsing session, so one coordinator and one
record source live for the lifetime of the process.
"""

import logging
from typing import Optional

from explorer.config import Settings, get_settings
from explorer.services.category_index import CategoryIndex, category_index
from explorer.services.record_source import RecordSource
from explorer.services.view_state import ViewStateCoordinator

logger = logging.getLogger(__name__)

_settings: Optional[Settings] = None
_coordinator: Optional[ViewStateCoordinator] = None
_record_source: Optional[RecordSource] = None


def get_app_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def get_coordinator() -> ViewStateCoordinator:
    """Get or create the session ViewStateCoordinator"""
    global _coordinator
    if _coordinator is None:
        _coordinator = ViewStateCoordinator(page_size=get_app_settings().page_size)
        logger.info(f"🧭 View coordinator created (page size {_coordinator.page_size})")
    return _coordinator


def get_record_source() -> RecordSource:
    """Get or create the RecordSource for the configured API"""
    global _record_source
    if _record_source is None:
        _record_source = RecordSource.from_settings(get_app_settings())
    return _record_source


def get_category_index() -> CategoryIndex:
    return category_index


def reset_session() -> None:
    """Drop the session singletons (settings are re-read on next access)"""
    global _settings, _coordinator, _record_source
    _settings = None
    _coordinator = None
    _record_source = None
