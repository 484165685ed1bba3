"""
Tests for validation and display helpers.
"""

from decimal import Decimal

import pytest

from tastemongers.utils.formatting import format_price, post_excerpt, render_stars
from tastemongers.utils.validation import is_valid_email


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "email",
        ["user@example.com", "First.Last+tag@sub.example.co.uk", "UPPER@EXAMPLE.ORG"],
    )
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["not-an-email", "", None, "user@example", "@example.com", "user@@example.com", "a b@example.com", 42],
    )
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestRenderStars:
    def test_partial(self):
        assert render_stars(7) == "★★★★★★★☆☆☆"

    def test_clamped(self):
        assert render_stars(12) == "★" * 10
        assert render_stars(-2) == "☆" * 10

    def test_custom_scale(self):
        assert render_stars(3, scale=5) == "★★★☆☆"


class TestFormatPrice:
    def test_two_decimals(self):
        assert format_price(Decimal("12.5")) == "$12.50"

    def test_rounds_half_up(self):
        assert format_price("3.005") == "$3.01"


class TestPostExcerpt:
    def test_short_post(self):
        assert post_excerpt("Short post") == "Short post..."

    def test_truncates_to_fifty_words(self):
        content = " ".join(f"w{i}" for i in range(60))

        excerpt = post_excerpt(content)

        assert excerpt.endswith("w49...")
        assert len(excerpt[:-3].split(" ")) == 50

    def test_empty(self):
        assert post_excerpt("") == "..."
