"""
Django models for the TasteMongers site.

Models: Rating, AffiliateOffer, BlogPost, NewsletterSubscriber

Table and column names match the schema the site was launched with
(expert_food_ratings, affiliate_links, blog_posts, newsletter_subscribers),
so existing databases can be adopted with a fake initial migration.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone

from tastemongers.constants import SCORE_MIN, SCORE_MAX

SCORE_VALIDATORS = [MinValueValidator(SCORE_MIN), MaxValueValidator(SCORE_MAX)]


class Rating(models.Model):
    """
    One expert-evaluated cheese.

    All four scores use the fixed 0-10 scale. A rating without affiliate
    offers is still listed; clients simply omit the "buy" section.
    """

    name = models.CharField(
        max_length=200,
        db_column="cheese_name",
        help_text="Display name of the cheese",
    )
    category = models.CharField(
        max_length=100,
        db_column="type",
        db_index=True,
        help_text="Cheese type label (e.g., Soft, Blue, Hard)",
    )
    origin = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Country or region of origin",
    )

    # Scores
    overall_rating = models.PositiveSmallIntegerField(
        validators=SCORE_VALIDATORS,
        help_text="Overall score (0-10)",
    )
    flavor_intensity = models.PositiveSmallIntegerField(
        validators=SCORE_VALIDATORS,
        help_text="Flavor intensity score (0-10)",
    )
    complexity = models.PositiveSmallIntegerField(
        validators=SCORE_VALIDATORS,
        help_text="Complexity score (0-10)",
    )
    creaminess = models.PositiveSmallIntegerField(
        validators=SCORE_VALIDATORS,
        help_text="Creaminess score (0-10)",
    )

    # Optional details
    tasting_notes = models.TextField(blank=True, null=True)
    pairing_suggestions = models.TextField(blank=True, null=True)
    image_url = models.CharField(
        max_length=500,
        blank=True,
        null=True,
        help_text="Image path or absolute URL",
    )

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "expert_food_ratings"
        ordering = ["-overall_rating", "id"]
        verbose_name = "Rating"
        verbose_name_plural = "Ratings"

    def __str__(self):
        return f"{self.name} ({self.overall_rating}/10)"


class AffiliateOffer(models.Model):
    """
    One purchasable variant (size/price) of a rated cheese.
    """

    rating = models.ForeignKey(
        Rating,
        on_delete=models.CASCADE,
        related_name="affiliate_offers",
        db_column="cheese_rating_id",
        help_text="The rating this offer belongs to",
    )
    affiliate_url = models.URLField(max_length=500)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Price in USD",
    )
    weight = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text="Package weight",
    )
    unit = models.CharField(max_length=20, help_text="Weight unit (e.g., oz, lb, g)")

    class Meta:
        db_table = "affiliate_links"
        ordering = ["id"]
        verbose_name = "Affiliate Offer"
        verbose_name_plural = "Affiliate Offers"

    def __str__(self):
        return f"{self.rating.name} - {self.weight}{self.unit} @ ${self.price}"


class BlogPost(models.Model):
    """A blog article, optionally promoting a single affiliate link."""

    title = models.CharField(max_length=255)
    content = models.TextField(help_text="HTML body")
    affiliate_link = models.URLField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "blog_posts"
        ordering = ["-created_at", "-id"]
        verbose_name = "Blog Post"
        verbose_name_plural = "Blog Posts"

    def __str__(self):
        return self.title


class NewsletterSubscriber(models.Model):
    """Email address signed up through the newsletter popup."""

    email = models.EmailField(max_length=255, unique=True)
    first_name = models.CharField(max_length=100, blank=True, null=True)
    last_name = models.CharField(max_length=100, blank=True, null=True)
    subscribed_at = models.DateTimeField(default=timezone.now)
    is_subscribed = models.BooleanField(default=True)

    class Meta:
        db_table = "newsletter_subscribers"
        ordering = ["-subscribed_at"]
        verbose_name = "Newsletter Subscriber"
        verbose_name_plural = "Newsletter Subscribers"

    def __str__(self):
        status = "subscribed" if self.is_subscribed else "unsubscribed"
        return f"{self.email} ({status})"
