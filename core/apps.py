"""
Core App Configuration
======================

Runs startup config validation when Django initializes.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Loyal core"

    def ready(self):
        from core.config import validate_config_on_startup
        validate_config_on_startup()
