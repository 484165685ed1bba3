"""
TasteMongers application configuration.
"""

from django.apps import AppConfig


class TasteMongersConfig(AppConfig):
    """Configuration for the tastemongers Django application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "tastemongers"
    verbose_name = "TasteMongers"
