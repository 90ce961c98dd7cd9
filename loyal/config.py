"""
Configuration Layer
===================

Centralized, type-safe configuration for every environment variable the
search service reads. Settings modules and services import from here
instead of calling os.getenv() directly.

Usage:
    from loyal.config import config

    # Smart-search tuning
    window = config.search.numeric_window_after

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer env var, falling back to the default on garbage."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"
    ).split(","))
    csrf_trusted_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CSRF_TRUSTED_ORIGINS",
        "http://localhost:3000,http://localhost:5173"
    ).split(","))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class SearchConfig:
    """Smart search bar settings (shipments + finance)."""
    max_query_length: int = field(default_factory=lambda: _env_int("SEARCH_MAX_QUERY_LENGTH", 500))
    # Characters inspected around a numeric keyword ("value", "طن", ...)
    numeric_window_before: int = field(default_factory=lambda: _env_int("SEARCH_NUMERIC_WINDOW_BEFORE", 30))
    numeric_window_after: int = field(default_factory=lambda: _env_int("SEARCH_NUMERIC_WINDOW_AFTER", 50))
    # October, i.e. FY runs Oct 1 -> Sep 30
    fiscal_year_start_month: int = field(default_factory=lambda: _env_int("SEARCH_FISCAL_YEAR_START_MONTH", 10))
    default_page_size: int = field(default_factory=lambda: _env_int("SEARCH_DEFAULT_PAGE_SIZE", 20))
    max_page_size: int = field(default_factory=lambda: _env_int("SEARCH_MAX_PAGE_SIZE", 100))

    def validate(self) -> List[str]:
        issues = []
        if self.max_query_length < 1:
            issues.append("CRITICAL: SEARCH_MAX_QUERY_LENGTH must be positive")
        if self.numeric_window_before < 0 or self.numeric_window_after < 0:
            issues.append("CRITICAL: SEARCH_NUMERIC_WINDOW_* must not be negative")
        if not 1 <= self.fiscal_year_start_month <= 12:
            issues.append("CRITICAL: SEARCH_FISCAL_YEAR_START_MONTH must be between 1 and 12")
        if self.default_page_size < 1 or self.max_page_size < self.default_page_size:
            issues.append("WARNING: SEARCH_DEFAULT_PAGE_SIZE should be between 1 and SEARCH_MAX_PAGE_SIZE")
        return issues


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")
    time_zone: str = field(default_factory=lambda: os.getenv("TIME_ZONE", "UTC"))

    # Sub-configurations
    security: SecurityConfig = field(default_factory=SecurityConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")

        issues.extend(self.search.validate())

        if self.time_zone == "UTC":
            issues.append("INFO: TIME_ZONE is UTC; relative dates ('today', 'this week') resolve in UTC")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(
            f"Search: max_length={self.search.max_query_length} "
            f"window=-{self.search.numeric_window_before}/+{self.search.numeric_window_after} "
            f"fy_start={self.search.fiscal_year_start_month}"
        )


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()
