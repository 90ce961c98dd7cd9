"""
Configuration Validators
========================

Startup validation for the Loyal configuration layer.
Raises ImproperlyConfigured for critical issues in production,
logs everything else.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def validate_config_on_startup(app_config=None):
    """
    Validate all configuration on application startup.

    Production:
        CRITICAL issues raise ImproperlyConfigured (hard failure).
        WARNING issues are logged but don't block startup.

    Development:
        All issues are logged as warnings/info.
    """
    if app_config is None:
        from loyal.config import config as app_config

    issues = app_config.validate()

    if not issues:
        logger.info("Configuration validated — no issues found")
        return

    critical_issues = [i for i in issues if i.startswith("CRITICAL")]

    for issue in issues:
        if issue.startswith("CRITICAL"):
            logger.critical(issue)
        elif issue.startswith("WARNING"):
            logger.warning(issue)
        else:
            logger.info(issue)

    if app_config.is_production and critical_issues:
        raise ImproperlyConfigured(
            "Configuration validation failed in production:\n"
            + "\n".join(f"  • {i}" for i in critical_issues)
        )
