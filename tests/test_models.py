"""
Tests for the TasteMongers models.
"""

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from tastemongers.models import AffiliateOffer, NewsletterSubscriber, Rating


@pytest.mark.django_db
class TestRating:
    def test_str(self, make_rating):
        rating = make_rating(name="Comté", overall_rating=9)

        assert str(rating) == "Comté (9/10)"

    def test_default_ordering(self, make_rating):
        make_rating(name="Low", overall_rating=3)
        make_rating(name="High", overall_rating=10)
        make_rating(name="Mid", overall_rating=6)

        assert [r.name for r in Rating.objects.all()] == ["High", "Mid", "Low"]

    @pytest.mark.parametrize("score", [-1, 11])
    def test_scores_outside_scale_fail_validation(self, make_rating, score):
        rating = Rating(
            name="Broken", category="Hard", origin="Nowhere",
            overall_rating=5, flavor_intensity=5, complexity=score, creaminess=5,
        )

        with pytest.raises(ValidationError) as exc_info:
            rating.full_clean()

        assert "complexity" in exc_info.value.message_dict

    def test_offers_deleted_with_rating(self, parmigiano):
        assert AffiliateOffer.objects.count() == 2

        parmigiano.delete()

        assert AffiliateOffer.objects.count() == 0


@pytest.mark.django_db
class TestAffiliateOffer:
    def test_str(self, parmigiano):
        offer = parmigiano.affiliate_offers.first()

        assert str(offer) == "Parmigiano Reggiano - 8.00oz @ $14.99"

    def test_negative_price_fails_validation(self, parmigiano):
        offer = AffiliateOffer(
            rating=parmigiano,
            affiliate_url="https://shop.example.com/x",
            price=Decimal("-1.00"),
            weight=Decimal("1.00"),
            unit="lb",
        )

        with pytest.raises(ValidationError) as exc_info:
            offer.full_clean()

        assert "price" in exc_info.value.message_dict


@pytest.mark.django_db
class TestNewsletterSubscriber:
    def test_email_is_unique(self):
        NewsletterSubscriber.objects.create(email="once@example.com")

        with pytest.raises(IntegrityError):
            NewsletterSubscriber.objects.create(email="once@example.com")

    def test_defaults(self):
        subscriber = NewsletterSubscriber.objects.create(email="new@example.com")

        assert subscriber.is_subscribed is True
        assert subscriber.subscribed_at is not None
