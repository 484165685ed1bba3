"""
Public API views.

Endpoints:
- GET  /api/ratings/                 - full rating list with affiliate offers
- GET  /api/ratings/facets/          - distinct types and origins
- POST /api/newsletter/subscribe/    - newsletter signup
- GET  /api/blog/                    - paginated blog posts, newest first
- GET  /api/blog/<post_id>/          - single blog post

None of these require authentication. Unexpected failures are logged,
reported to Sentry and answered with a generic message.
"""

import logging

from django.db import DatabaseError, transaction
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
    throttle_classes,
)
from rest_framework.exceptions import ParseError
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from tastemongers.api.serializers import (
    BlogPostSerializer,
    BlogPostSummarySerializer,
    NewsletterSubscribeSerializer,
    RatingSerializer,
)
from tastemongers.api.throttling import NewsletterSubscribeThrottle
from tastemongers.models import BlogPost, NewsletterSubscriber, Rating
from tastemongers.monitoring import capture_api_error
from tastemongers.services.catalog_query import (
    FilterState,
    SortOption,
    apply_query,
    facet_values,
)
from tastemongers.utils.validation import is_valid_email

logger = logging.getLogger(__name__)

RATING_QUERY_PARAMS = (
    "type",
    "category",
    "origin",
    "min_overall_rating",
    "min_flavor_intensity",
    "min_complexity",
    "min_creaminess",
    "search",
    "sort",
)

INVALID_EMAIL_MESSAGE = "Invalid email address"
INVALID_NAME_MESSAGE = "First and last name must be at most 100 characters"
INVALID_BODY_MESSAGE = "Invalid request body"


def _subscribe_error_message(errors):
    """Pick the client-facing message for a rejected subscribe body."""
    if "email" in errors:
        return INVALID_EMAIL_MESSAGE
    if "firstName" in errors or "lastName" in errors:
        return INVALID_NAME_MESSAGE
    return INVALID_BODY_MESSAGE


def _load_ratings():
    """All ratings with their offers, read as one consistent snapshot."""
    with transaction.atomic():
        return list(
            Rating.objects.prefetch_related("affiliate_offers").order_by(
                "-overall_rating", "id"
            )
        )


class BlogPostPagination(PageNumberPagination):
    page_size = 5


# ============================================================
# Ratings
# ============================================================

@extend_schema(
    tags=["Ratings"],
    summary="List cheese ratings",
    description=(
        "All ratings ordered by overall rating (highest first), each with its "
        "affiliate offers. Optional filter and sort parameters run the same "
        "query engine the catalog page uses; without them the store order is returned."
    ),
    parameters=[
        OpenApiParameter("type", OpenApiTypes.STR, description="Exact cheese type"),
        OpenApiParameter("origin", OpenApiTypes.STR, description="Exact origin"),
        OpenApiParameter("min_overall_rating", OpenApiTypes.INT, description="0-10"),
        OpenApiParameter("min_flavor_intensity", OpenApiTypes.INT, description="0-10"),
        OpenApiParameter("min_complexity", OpenApiTypes.INT, description="0-10"),
        OpenApiParameter("min_creaminess", OpenApiTypes.INT, description="0-10"),
        OpenApiParameter("search", OpenApiTypes.STR, description="Name substring, case-insensitive"),
        OpenApiParameter(
            "sort",
            OpenApiTypes.STR,
            enum=[option.value for option in SortOption],
            description="Sort selection; empty keeps the default order",
        ),
    ],
    responses={200: RatingSerializer(many=True), 500: OpenApiTypes.OBJECT},
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def list_ratings(request):
    """
    Return every rating with an embedded affiliate_options array.
    """
    try:
        ratings = _load_ratings()
    except DatabaseError as e:
        logger.exception("Error fetching ratings")
        capture_api_error(e, endpoint="list_ratings")
        return Response(
            {"error": "Failed to fetch ratings"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if any(request.query_params.get(name) for name in RATING_QUERY_PARAMS):
        filters = FilterState.from_query_params(request.query_params)
        sort = SortOption.parse(request.query_params.get("sort"))
        ratings = apply_query(ratings, filters, sort)

    return Response(RatingSerializer(ratings, many=True).data)


@extend_schema(
    tags=["Ratings"],
    summary="List rating facets",
    description="Distinct cheese types and origins, in store order of first appearance.",
    responses={200: OpenApiTypes.OBJECT},
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def rating_facets(request):
    try:
        ratings = list(Rating.objects.only("category", "origin").order_by("-overall_rating", "id"))
    except DatabaseError as e:
        logger.exception("Error fetching rating facets")
        capture_api_error(e, endpoint="rating_facets")
        return Response(
            {"error": "Failed to fetch ratings"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response(facet_values(ratings))


# ============================================================
# Newsletter
# ============================================================

@extend_schema(
    tags=["Newsletter"],
    summary="Subscribe to the newsletter",
    request=NewsletterSubscribeSerializer,
    responses={
        200: OpenApiTypes.OBJECT,
        400: OpenApiTypes.OBJECT,
        500: OpenApiTypes.OBJECT,
    },
)
@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([NewsletterSubscribeThrottle])
def subscribe_newsletter(request):
    """
    Store a newsletter signup.

    Request body:
    {
        "email": "user@example.com",
        "firstName": "Ada",     // Optional
        "lastName": "Lovelace"  // Optional
    }

    Signing up an address that already exists re-activates it.
    """
    try:
        body = request.data
    except ParseError:
        return Response(
            {"message": INVALID_BODY_MESSAGE},
            status=status.HTTP_400_BAD_REQUEST,
        )

    serializer = NewsletterSubscribeSerializer(data=body)
    if not serializer.is_valid():
        return Response(
            {"message": _subscribe_error_message(serializer.errors)},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if not is_valid_email(serializer.validated_data["email"]):
        return Response(
            {"message": INVALID_EMAIL_MESSAGE},
            status=status.HTTP_400_BAD_REQUEST,
        )

    data = serializer.validated_data
    email = data["email"]

    try:
        subscriber, created = NewsletterSubscriber.objects.update_or_create(
            email=email,
            defaults={
                "first_name": data.get("firstName") or None,
                "last_name": data.get("lastName") or None,
                "subscribed_at": timezone.now(),
                "is_subscribed": True,
            },
        )
    except DatabaseError as e:
        logger.exception("Subscription error")
        capture_api_error(e, endpoint="subscribe_newsletter", email=email)
        return Response(
            {"message": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info(
        "Newsletter subscriber %s (id=%s)",
        "created" if created else "re-activated",
        subscriber.pk,
    )
    return Response({"message": "Subscription successful"})


# ============================================================
# Blog
# ============================================================

@extend_schema(
    tags=["Blog"],
    summary="List blog posts",
    description="Newest first, five per page. Each entry carries a 50-word excerpt.",
    parameters=[OpenApiParameter("page", OpenApiTypes.INT, description="1-indexed page")],
    responses={200: BlogPostSummarySerializer(many=True)},
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def list_blog_posts(request):
    paginator = BlogPostPagination()
    page = paginator.paginate_queryset(BlogPost.objects.order_by("-created_at", "-id"), request)
    serializer = BlogPostSummarySerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)


@extend_schema(
    tags=["Blog"],
    summary="Get a blog post",
    responses={200: BlogPostSerializer, 404: OpenApiTypes.OBJECT},
)
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def get_blog_post(request, post_id):
    try:
        post = BlogPost.objects.get(pk=post_id)
    except BlogPost.DoesNotExist:
        return Response(
            {"error": "Blog post not found"},
            status=status.HTTP_404_NOT_FOUND,
        )
    return Response(BlogPostSerializer(post).data)
