"""
Site-level views.

Includes the health check endpoint used by the load balancer.
"""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Health check endpoint.

    Endpoint: GET /api/health/
    No authentication required (for load balancer checks).

    Response fields:
        - status: "healthy" or "unhealthy"
        - database: "connected" or "error"

    Returns:
        JsonResponse: HTTP 200 when healthy, HTTP 503 when the database is unreachable
    """
    status = "healthy"
    http_status = 200

    database_status = "connected"
    try:
        connection.ensure_connection()
    except DatabaseError:
        logger.exception("Health check: database connection failed")
        database_status = "error"
        status = "unhealthy"
        http_status = 503

    return JsonResponse(
        {"status": status, "database": database_status},
        status=http_status,
    )
