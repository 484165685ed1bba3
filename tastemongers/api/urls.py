"""
URL patterns for the public API (mounted under /api/).

Endpoints:
- GET  /api/ratings/               - Rating list with affiliate offers
- GET  /api/ratings/facets/        - Distinct types and origins
- POST /api/newsletter/subscribe/  - Newsletter signup
- GET  /api/blog/                  - Paginated blog posts
- GET  /api/blog/<post_id>/        - Single blog post
"""

from django.urls import path

from tastemongers.api.views import (
    get_blog_post,
    list_blog_posts,
    list_ratings,
    rating_facets,
    subscribe_newsletter,
)

app_name = "tastemongers_api"

urlpatterns = [
    # Ratings catalog
    path("ratings/", list_ratings, name="list_ratings"),
    path("ratings/facets/", rating_facets, name="rating_facets"),

    # Newsletter
    path("newsletter/subscribe/", subscribe_newsletter, name="subscribe_newsletter"),

    # Blog
    path("blog/", list_blog_posts, name="list_blog_posts"),
    path("blog/<int:post_id>/", get_blog_post, name="get_blog_post"),
]
