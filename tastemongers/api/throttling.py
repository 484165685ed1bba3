"""
Throttle classes for the public API.
"""

from django.conf import settings
from rest_framework.throttling import AnonRateThrottle


class NewsletterSubscribeThrottle(AnonRateThrottle):
    """
    Throttle for the newsletter subscribe endpoint.

    Rate: settings.NEWSLETTER_SUBSCRIBE_RATE (default 20 requests per hour per IP).
    Applied to: /api/newsletter/subscribe/
    """

    scope = "newsletter_subscribe"

    def get_rate(self):
        return getattr(settings, "NEWSLETTER_SUBSCRIBE_RATE", "20/hour")
