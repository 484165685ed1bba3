"""
Tests for the health check endpoint.
"""

from unittest.mock import patch

import pytest
from django.db import OperationalError


@pytest.mark.django_db
class TestHealthCheck:
    def test_healthy(self, client):
        response = client.get("/api/health/")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}

    def test_database_down(self, client):
        with patch(
            "tastemongers.views.connection.ensure_connection",
            side_effect=OperationalError("could not connect"),
        ):
            response = client.get("/api/health/")

        assert response.status_code == 503
        assert response.json() == {"status": "unhealthy", "database": "error"}


@pytest.mark.django_db
def test_openapi_schema_lists_endpoints(client):
    response = client.get("/api/schema/", {"format": "json"})

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/ratings/" in paths
    assert "/api/newsletter/subscribe/" in paths
    assert "/api/blog/{post_id}/" in paths
