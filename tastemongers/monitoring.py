"""
Sentry error reporting for API failures.

Sentry itself is initialised in config/settings/base.py when SENTRY_DSN is
set; without a DSN the calls below are no-ops inside sentry_sdk.

Usage:
    from tastemongers.monitoring import capture_api_error

    try:
        ...
    except Exception as e:
        capture_api_error(e, endpoint="newsletter_subscribe", email=email)
"""

import logging
from typing import Any, Dict

import sentry_sdk

logger = logging.getLogger(__name__)

# Context keys whose values must never reach Sentry
SENSITIVE_FIELDS = {
    "email",
    "first_name",
    "last_name",
    "firstname",
    "lastname",
    "password",
    "token",
    "authorization",
    "cookie",
}


def _filter_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace values of sensitive keys with a placeholder, recursively.
    """
    filtered = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            filtered[key] = "[Filtered]"
        elif isinstance(value, dict):
            filtered[key] = _filter_sensitive_data(value)
        else:
            filtered[key] = value
    return filtered


def capture_api_error(error: Exception, endpoint: str, **context: Any) -> None:
    """
    Report an unexpected API error to Sentry with request context.

    Args:
        error: The exception that was caught
        endpoint: Name of the API endpoint that failed
        **context: Extra context; personal data is filtered out
    """
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("endpoint", endpoint)
        scope.set_context("api", _filter_sensitive_data(context))
        sentry_sdk.capture_exception(error)
    logger.debug("Reported %s error from %s", type(error).__name__, endpoint)
