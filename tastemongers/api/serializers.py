"""
DRF serializers for the public JSON API.

Rating keys keep the names the catalog front-end has always consumed
(cheese_name, type, affiliate_options).
"""

from rest_framework import serializers

from tastemongers.models import AffiliateOffer, BlogPost, Rating
from tastemongers.utils.formatting import post_excerpt


class AffiliateOfferSerializer(serializers.ModelSerializer):
    class Meta:
        model = AffiliateOffer
        fields = ["affiliate_url", "price", "weight", "unit"]


class RatingSerializer(serializers.ModelSerializer):
    """A rating with its affiliate offers embedded (empty list if none)."""

    cheese_name = serializers.CharField(source="name")
    type = serializers.CharField(source="category")
    affiliate_options = AffiliateOfferSerializer(
        source="affiliate_offers", many=True, read_only=True
    )

    class Meta:
        model = Rating
        fields = [
            "id",
            "cheese_name",
            "type",
            "origin",
            "flavor_intensity",
            "complexity",
            "creaminess",
            "overall_rating",
            "tasting_notes",
            "pairing_suggestions",
            "image_url",
            "affiliate_options",
        ]


class BlogPostSerializer(serializers.ModelSerializer):
    class Meta:
        model = BlogPost
        fields = ["id", "title", "content", "affiliate_link", "created_at"]


class BlogPostSummarySerializer(serializers.ModelSerializer):
    """List entry: the body is cut down to an excerpt."""

    excerpt = serializers.SerializerMethodField()

    class Meta:
        model = BlogPost
        fields = ["id", "title", "excerpt", "affiliate_link", "created_at"]

    def get_excerpt(self, obj) -> str:
        return post_excerpt(obj.content)


class NewsletterSubscribeSerializer(serializers.Serializer):
    """
    Subscribe request body. Email shape is checked by the view so the
    error message stays the one clients expect.
    """

    email = serializers.CharField(required=False, allow_blank=True, default="")
    firstName = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100
    )
    lastName = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=100
    )
