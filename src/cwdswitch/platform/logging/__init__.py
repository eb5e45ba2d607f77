"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper, and the Rich event handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import DirectoryEventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "DirectoryEventRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
