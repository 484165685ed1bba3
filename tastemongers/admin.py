"""
Django admin configuration for the TasteMongers site.

Ratings, their affiliate offers and blog posts are maintained here by the
editorial team; newsletter subscribers can be reviewed and unsubscribed.
"""

from django.contrib import admin
from django.utils.html import format_html

from tastemongers.models import (
    AffiliateOffer,
    BlogPost,
    NewsletterSubscriber,
    Rating,
)
from tastemongers.utils.formatting import format_price, render_stars


class AffiliateOfferInline(admin.TabularInline):
    model = AffiliateOffer
    extra = 1
    fields = ["affiliate_url", "price", "weight", "unit"]


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    """
    Admin interface for cheese ratings.

    Affiliate offers are edited inline on the rating page.
    """

    list_display = [
        "name",
        "category",
        "origin",
        "overall_rating",
        "overall_stars",
        "offer_count",
    ]
    list_filter = ["category", "origin", "overall_rating"]
    search_fields = ["name", "category", "origin"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-overall_rating", "name"]
    inlines = [AffiliateOfferInline]

    fieldsets = (
        ("Identity", {
            "fields": ("name", "category", "origin", "image_url"),
        }),
        ("Scores", {
            "fields": (
                "overall_rating",
                "flavor_intensity",
                "complexity",
                "creaminess",
            ),
        }),
        ("Notes", {
            "fields": ("tasting_notes", "pairing_suggestions"),
        }),
        ("Timestamps", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related("affiliate_offers")

    @admin.display(description="Overall")
    def overall_stars(self, obj):
        return format_html('<span style="color: #d4a017;">{}</span>', render_stars(obj.overall_rating))

    @admin.display(description="Offers")
    def offer_count(self, obj):
        return len(obj.affiliate_offers.all())


@admin.register(AffiliateOffer)
class AffiliateOfferAdmin(admin.ModelAdmin):
    list_display = ["rating", "weight", "unit", "price_display", "affiliate_url"]
    list_select_related = ["rating"]
    search_fields = ["rating__name", "affiliate_url"]

    @admin.display(description="Price", ordering="price")
    def price_display(self, obj):
        return format_price(obj.price)


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ["title", "created_at", "has_affiliate_link"]
    search_fields = ["title", "content"]
    readonly_fields = ["updated_at"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    @admin.display(boolean=True, description="Affiliate link")
    def has_affiliate_link(self, obj):
        return bool(obj.affiliate_link)


@admin.register(NewsletterSubscriber)
class NewsletterSubscriberAdmin(admin.ModelAdmin):
    list_display = ["email", "first_name", "last_name", "subscribed_at", "is_subscribed"]
    list_filter = ["is_subscribed"]
    search_fields = ["email", "first_name", "last_name"]
    readonly_fields = ["subscribed_at"]
    actions = ["unsubscribe"]

    @admin.action(description="Unsubscribe selected addresses")
    def unsubscribe(self, request, queryset):
        updated = queryset.update(is_subscribed=False)
        self.message_user(request, f"Unsubscribed {updated} address(es).")
