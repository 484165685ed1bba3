"""
Tests for the Django admin configuration.
"""

import pytest
from django.contrib.admin.sites import AdminSite
from django.contrib.auth import get_user_model
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.middleware import SessionMiddleware
from django.test import RequestFactory

from tastemongers.admin import AffiliateOfferAdmin, NewsletterSubscriberAdmin, RatingAdmin
from tastemongers.models import AffiliateOffer, NewsletterSubscriber, Rating


@pytest.fixture
def admin_user(db):
    """Create an admin user for testing."""
    User = get_user_model()
    return User.objects.create_superuser(
        username="admin",
        email="admin@test.com",
        password="testpass123",
    )


@pytest.fixture
def admin_request(admin_user):
    """Create an admin request with user and messages support attached."""
    request = RequestFactory().get("/admin/")
    request.user = admin_user

    middleware = SessionMiddleware(lambda x: None)
    middleware.process_request(request)
    request.session.save()

    setattr(request, "_messages", FallbackStorage(request))

    return request


@pytest.mark.django_db
class TestRatingAdmin:
    def test_display_helpers(self, parmigiano):
        model_admin = RatingAdmin(Rating, AdminSite())

        assert "★" * 9 + "☆" in model_admin.overall_stars(parmigiano)
        assert model_admin.offer_count(parmigiano) == 2

    def test_changelist_renders(self, client, admin_user, parmigiano):
        client.force_login(admin_user)

        response = client.get("/admin/tastemongers/rating/")

        assert response.status_code == 200
        assert b"Parmigiano Reggiano" in response.content

    def test_change_form_renders_inline(self, client, admin_user, parmigiano):
        client.force_login(admin_user)

        response = client.get(f"/admin/tastemongers/rating/{parmigiano.pk}/change/")

        assert response.status_code == 200
        assert b"shop.example.com/parm-8oz" in response.content


@pytest.mark.django_db
def test_offer_price_display(parmigiano):
    model_admin = AffiliateOfferAdmin(AffiliateOffer, AdminSite())

    assert model_admin.price_display(parmigiano.affiliate_offers.first()) == "$14.99"


@pytest.mark.django_db
def test_unsubscribe_action(admin_request):
    NewsletterSubscriber.objects.create(email="a@example.com")
    NewsletterSubscriber.objects.create(email="b@example.com")
    model_admin = NewsletterSubscriberAdmin(NewsletterSubscriber, AdminSite())

    model_admin.unsubscribe(admin_request, NewsletterSubscriber.objects.all())

    assert not NewsletterSubscriber.objects.filter(is_subscribed=True).exists()
