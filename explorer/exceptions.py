#!/usr/bin/env python3
"""
Error taxonomy for the catalog engine
"""

from typing import Any, Optional


class ExplorerError(Exception):
    """Base class for all explorer failures"""


class FetchFailure(ExplorerError):
    """Every attempt against the record source failed"""

    def __init__(self, message: str, url: Optional[str] = None, attempts: int = 0):
        super().__init__(message)
        self.message = message
        self.url = url
        self.attempts = attempts


class InvalidParameter(ExplorerError, ValueError):
    """An out-of-domain value reached a parameter-setting boundary"""

    def __init__(self, name: str, value: Any, reason: str = ""):
        message = f"Invalid {name}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name
        self.value = value
