"""
Pytest configuration and fixtures for the TasteMongers test suite.
"""

from decimal import Decimal

import pytest


@pytest.fixture(scope="session")
def django_db_setup(django_db_blocker):
    """Configure the test database and run migrations."""
    from django.core.management import call_command

    with django_db_blocker.unblock():
        call_command("migrate", "--run-syncdb", verbosity=0)


@pytest.fixture(autouse=True)
def clear_cache():
    """Throttle history lives in the cache; start every test empty."""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Create a test API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def make_rating(db):
    """Factory creating Rating rows with sensible defaults."""
    from tastemongers.models import Rating

    def _make(**overrides):
        fields = {
            "name": "Test Cheese",
            "category": "Hard",
            "origin": "Italy",
            "overall_rating": 7,
            "flavor_intensity": 5,
            "complexity": 5,
            "creaminess": 5,
            "tasting_notes": "Nutty",
            "pairing_suggestions": "Red wine",
        }
        fields.update(overrides)
        return Rating.objects.create(**fields)

    return _make


@pytest.fixture
def parmigiano(make_rating):
    """A rating with two affiliate offers."""
    from tastemongers.models import AffiliateOffer

    rating = make_rating(
        name="Parmigiano Reggiano",
        category="Hard",
        origin="Italy",
        overall_rating=9,
        flavor_intensity=8,
        complexity=9,
        creaminess=3,
    )
    AffiliateOffer.objects.create(
        rating=rating,
        affiliate_url="https://shop.example.com/parm-8oz",
        price=Decimal("14.99"),
        weight=Decimal("8.00"),
        unit="oz",
    )
    AffiliateOffer.objects.create(
        rating=rating,
        affiliate_url="https://shop.example.com/parm-1lb",
        price=Decimal("26.50"),
        weight=Decimal("1.00"),
        unit="lb",
    )
    return rating


@pytest.fixture
def record_factory():
    """Factory for client-side RatingRecord values."""
    from tastemongers.services.rating_types import RatingRecord

    counter = {"next_id": 1}

    def _make(**overrides):
        fields = {
            "id": counter["next_id"],
            "name": f"Cheese {counter['next_id']}",
            "category": "Hard",
            "origin": "France",
            "overall_rating": 5,
            "flavor_intensity": 5,
            "complexity": 5,
            "creaminess": 5,
        }
        fields.update(overrides)
        counter["next_id"] = max(counter["next_id"], fields["id"]) + 1
        return RatingRecord(**fields)

    return _make
