"""
Service layer for the tastemongers app.

- catalog_query: filtering, sorting and faceting of ratings
- detail_navigator: prev/next navigation in the rating detail view
- ratings_client: ratings fetch layer and catalog page state
- newsletter: newsletter signup client and popup state
"""

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0


def client_settings():
    """(base_url, timeout) for the HTTP clients, from Django settings."""
    from django.conf import settings

    base_url = getattr(settings, "TASTEMONGERS_API_BASE_URL", DEFAULT_BASE_URL)
    timeout = getattr(settings, "TASTEMONGERS_CLIENT_TIMEOUT", DEFAULT_TIMEOUT)
    return base_url, timeout
