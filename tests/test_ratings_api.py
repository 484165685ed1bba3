"""
Tests for the ratings API endpoints.

GET /api/ratings/ and GET /api/ratings/facets/
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

RATINGS_URL = "/api/ratings/"
FACETS_URL = "/api/ratings/facets/"


@pytest.fixture
def store(make_rating, parmigiano):
    """Parmigiano (9) plus two ratings without offers."""
    brie = make_rating(
        name="Brie de Meaux", category="Soft", origin="France",
        overall_rating=7, flavor_intensity=5, complexity=6, creaminess=10,
    )
    comte = make_rating(
        name="Comté", category="Hard", origin="France",
        overall_rating=8, flavor_intensity=7, complexity=9, creaminess=5,
    )
    return {"parmigiano": parmigiano, "brie": brie, "comte": comte}


@pytest.mark.django_db
class TestListRatings:
    def test_ordered_by_overall_rating_desc(self, api_client, store):
        response = api_client.get(RATINGS_URL)

        assert response.status_code == 200
        assert [item["overall_rating"] for item in response.json()] == [9, 8, 7]

    def test_wire_format(self, api_client, store):
        data = api_client.get(RATINGS_URL).json()
        parmigiano = data[0]

        assert parmigiano["cheese_name"] == "Parmigiano Reggiano"
        assert parmigiano["type"] == "Hard"
        assert parmigiano["origin"] == "Italy"
        assert set(parmigiano) == {
            "id", "cheese_name", "type", "origin",
            "flavor_intensity", "complexity", "creaminess", "overall_rating",
            "tasting_notes", "pairing_suggestions", "image_url", "affiliate_options",
        }

    def test_embeds_affiliate_offers(self, api_client, store):
        offers = api_client.get(RATINGS_URL).json()[0]["affiliate_options"]

        assert offers == [
            {"affiliate_url": "https://shop.example.com/parm-8oz", "price": 14.99, "weight": 8.0, "unit": "oz"},
            {"affiliate_url": "https://shop.example.com/parm-1lb", "price": 26.5, "weight": 1.0, "unit": "lb"},
        ]

    def test_empty_offers_array(self, api_client, store):
        data = api_client.get(RATINGS_URL).json()

        assert data[1]["affiliate_options"] == []
        assert data[2]["affiliate_options"] == []

    def test_empty_store(self, api_client, db):
        response = api_client.get(RATINGS_URL)

        assert response.status_code == 200
        assert response.json() == []

    def test_no_authentication_required(self, api_client, store):
        api_client.logout()

        assert api_client.get(RATINGS_URL).status_code == 200

    def test_filter_parameters(self, api_client, store):
        response = api_client.get(RATINGS_URL, {"origin": "France", "min_overall_rating": "8"})

        assert [item["cheese_name"] for item in response.json()] == ["Comté"]

    def test_type_and_search_parameters(self, api_client, store):
        response = api_client.get(RATINGS_URL, {"type": "Soft", "search": "BRIE"})

        assert [item["cheese_name"] for item in response.json()] == ["Brie de Meaux"]

    def test_sort_parameter(self, api_client, store):
        response = api_client.get(RATINGS_URL, {"sort": "name_asc"})

        assert [item["cheese_name"] for item in response.json()] == [
            "Brie de Meaux", "Comté", "Parmigiano Reggiano",
        ]

    def test_unknown_sort_keeps_default_order(self, api_client, store):
        response = api_client.get(RATINGS_URL, {"sort": "price_desc"})

        assert [item["overall_rating"] for item in response.json()] == [9, 8, 7]

    def test_database_failure(self, api_client, db):
        with patch(
            "tastemongers.api.views._load_ratings",
            side_effect=DatabaseError("connection lost"),
        ), patch("tastemongers.api.views.capture_api_error") as mock_capture:
            response = api_client.get(RATINGS_URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch ratings"}
        mock_capture.assert_called_once()
        assert mock_capture.call_args.kwargs["endpoint"] == "list_ratings"


@pytest.mark.django_db
class TestRatingFacets:
    def test_first_appearance_in_store_order(self, api_client, store):
        response = api_client.get(FACETS_URL)

        assert response.status_code == 200
        assert response.json() == {"types": ["Hard", "Soft"], "origins": ["Italy", "France"]}

    def test_empty(self, api_client, db):
        assert api_client.get(FACETS_URL).json() == {"types": [], "origins": []}


@pytest.mark.django_db
def test_fractional_threshold_parameter(api_client, store):
    response = api_client.get(RATINGS_URL, {"min_overall_rating": "7.5"})

    assert [item["overall_rating"] for item in response.json()] == [9, 8]
