"""Logging setup for ctranscode.

Provides configurable logging with JSON format support and file rotation.
"""

from ctranscode.logging.config import configure_logging
from ctranscode.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
