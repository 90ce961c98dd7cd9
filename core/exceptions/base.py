"""
Loyal Exception Hierarchy
=========================

Domain-specific exceptions for structured error handling across the search API.
The parsers themselves never raise for user text; these cover bad request
parameters and misconfiguration.

Usage::

    from core.exceptions import ValidationError, ConfigurationError

    # In a view:
    raise ValidationError("Unknown operator '!='", field="totalValueOp")

    # When building a parser:
    raise ConfigurationError("Window must not be negative", setting="window_before")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class LoyalError(Exception):
    """Base exception for all Loyal application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(LoyalError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(LoyalError):
    """Missing or invalid configuration (env vars, settings, parser options)."""

    error_code = "configuration_error"

    def __init__(self, message="Configuration error", setting=None, **kwargs):
        if setting:
            kwargs["setting"] = setting
        super().__init__(message, **kwargs)
