"""
Initial schema: ratings catalog, affiliate offers, blog posts and
newsletter subscribers.
"""

from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def score_field(help_text):
    return models.PositiveSmallIntegerField(
        help_text=help_text,
        validators=[
            django.core.validators.MinValueValidator(0),
            django.core.validators.MaxValueValidator(10),
        ],
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Rating",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        db_column="cheese_name",
                        help_text="Display name of the cheese",
                        max_length=200,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        db_column="type",
                        db_index=True,
                        help_text="Cheese type label (e.g., Soft, Blue, Hard)",
                        max_length=100,
                    ),
                ),
                (
                    "origin",
                    models.CharField(
                        db_index=True,
                        help_text="Country or region of origin",
                        max_length=100,
                    ),
                ),
                ("overall_rating", score_field("Overall score (0-10)")),
                ("flavor_intensity", score_field("Flavor intensity score (0-10)")),
                ("complexity", score_field("Complexity score (0-10)")),
                ("creaminess", score_field("Creaminess score (0-10)")),
                ("tasting_notes", models.TextField(blank=True, null=True)),
                ("pairing_suggestions", models.TextField(blank=True, null=True)),
                (
                    "image_url",
                    models.CharField(
                        blank=True,
                        help_text="Image path or absolute URL",
                        max_length=500,
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Rating",
                "verbose_name_plural": "Ratings",
                "db_table": "expert_food_ratings",
                "ordering": ["-overall_rating", "id"],
            },
        ),
        migrations.CreateModel(
            name="AffiliateOffer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("affiliate_url", models.URLField(max_length=500)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Price in USD",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "weight",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Package weight",
                        max_digits=8,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.01"))],
                    ),
                ),
                (
                    "unit",
                    models.CharField(help_text="Weight unit (e.g., oz, lb, g)", max_length=20),
                ),
                (
                    "rating",
                    models.ForeignKey(
                        db_column="cheese_rating_id",
                        help_text="The rating this offer belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="affiliate_offers",
                        to="tastemongers.rating",
                    ),
                ),
            ],
            options={
                "verbose_name": "Affiliate Offer",
                "verbose_name_plural": "Affiliate Offers",
                "db_table": "affiliate_links",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="BlogPost",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField(help_text="HTML body")),
                ("affiliate_link", models.URLField(blank=True, max_length=500, null=True)),
                (
                    "created_at",
                    models.DateTimeField(db_index=True, default=django.utils.timezone.now),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Blog Post",
                "verbose_name_plural": "Blog Posts",
                "db_table": "blog_posts",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="NewsletterSubscriber",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("email", models.EmailField(max_length=255, unique=True)),
                ("first_name", models.CharField(blank=True, max_length=100, null=True)),
                ("last_name", models.CharField(blank=True, max_length=100, null=True)),
                ("subscribed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("is_subscribed", models.BooleanField(default=True)),
            ],
            options={
                "verbose_name": "Newsletter Subscriber",
                "verbose_name_plural": "Newsletter Subscribers",
                "db_table": "newsletter_subscribers",
                "ordering": ["-subscribed_at"],
            },
        ),
    ]
