"""
Development settings for the TasteMongers site.

Uses the configured database when one is set in the environment, otherwise a
local SQLite file, plus a database cache so no Redis is needed.
"""

import os

from tastemongers.utils.database import resolve_database_config

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

DATABASES = {
    "default": resolve_database_config(
        os.environ, sqlite_path=BASE_DIR / "db.sqlite3"
    ).to_django(),
}

# Development Cache - run `manage.py createcachetable` once
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.db.DatabaseCache",
        "LOCATION": "cache_table",
    }
}

# Development logging - verbose output
LOGGING["loggers"]["django"]["level"] = "DEBUG"
LOGGING["loggers"]["tastemongers"]["level"] = "DEBUG"

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

INTERNAL_IPS = ["127.0.0.1"]

AUTH_PASSWORD_VALIDATORS = []
