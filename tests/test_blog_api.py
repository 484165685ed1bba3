"""
Tests for the blog read endpoints.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from tastemongers.models import BlogPost


@pytest.fixture
def posts(db):
    """Seven posts, one day apart; post 6 is the newest."""
    now = timezone.now()
    created = []
    for index in range(7):
        created.append(BlogPost.objects.create(
            title=f"Post {index}",
            content=f"Body of post {index}",
            created_at=now - timedelta(days=7 - index),
        ))
    return created


@pytest.mark.django_db
class TestListBlogPosts:
    def test_first_page(self, api_client, posts):
        response = api_client.get("/api/blog/")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 7
        assert data["previous"] is None
        assert data["next"] is not None
        assert [post["title"] for post in data["results"]] == [
            "Post 6", "Post 5", "Post 4", "Post 3", "Post 2",
        ]

    def test_second_page(self, api_client, posts):
        data = api_client.get("/api/blog/", {"page": 2}).json()

        assert [post["title"] for post in data["results"]] == ["Post 1", "Post 0"]
        assert data["next"] is None

    def test_out_of_range_page(self, api_client, posts):
        assert api_client.get("/api/blog/", {"page": 9}).status_code == 404

    def test_results_carry_excerpt_not_content(self, api_client, db):
        BlogPost.objects.create(title="Long", content=" ".join(["word"] * 80))

        result = api_client.get("/api/blog/").json()["results"][0]

        assert "content" not in result
        assert result["excerpt"] == " ".join(["word"] * 50) + "..."

    def test_empty(self, api_client, db):
        data = api_client.get("/api/blog/").json()

        assert data["count"] == 0
        assert data["results"] == []


@pytest.mark.django_db
class TestGetBlogPost:
    def test_found(self, api_client, db):
        post = BlogPost.objects.create(
            title="Pairing blue cheese",
            content="Full body text",
            affiliate_link="https://shop.example.com/blue-box",
        )

        response = api_client.get(f"/api/blog/{post.id}/")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Pairing blue cheese"
        assert data["content"] == "Full body text"
        assert data["affiliate_link"] == "https://shop.example.com/blue-box"

    def test_not_found(self, api_client, db):
        response = api_client.get("/api/blog/999999/")

        assert response.status_code == 404
        assert response.json() == {"error": "Blog post not found"}
