"""
Display helpers used by the API serializers.
"""

from decimal import Decimal, ROUND_HALF_UP

from tastemongers.constants import SCORE_MAX

EXCERPT_WORDS = 50


def render_stars(score: int, scale: int = SCORE_MAX) -> str:
    """
    Render a score as a bar of filled and empty stars.

    Example:
        >>> render_stars(7)
        '★★★★★★★☆☆☆'
    """
    score = max(0, min(int(score), scale))
    return "★" * score + "☆" * (scale - score)


def format_price(price) -> str:
    """Format a price with two decimals and a dollar sign."""
    value = Decimal(str(price)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"${value}"


def post_excerpt(content: str, words: int = EXCERPT_WORDS) -> str:
    """
    First ``words`` space-separated words of a post followed by an ellipsis.

    Splits on single spaces like the blog listing always has, so HTML
    inside the body is carried over untouched.
    """
    return " ".join((content or "").split(" ")[:words]) + "..."
