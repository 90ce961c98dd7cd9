"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, ConfigurationError
    from core.exceptions import loyal_exception_handler
"""

from .base import (
    LoyalError,
    ValidationError,
    ConfigurationError,
)

from .handlers import loyal_exception_handler

__all__ = [
    "LoyalError",
    "ValidationError",
    "ConfigurationError",
    "loyal_exception_handler",
]
