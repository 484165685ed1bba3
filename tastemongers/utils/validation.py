"""
Input validation helpers shared by the subscribe endpoint and the
newsletter client.
"""

import re

# local@domain.tld, case-insensitive
EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)


def is_valid_email(email) -> bool:
    """
    Check an email address against the signup pattern.

    Args:
        email: Candidate value, usually straight from user input

    Returns:
        True if the value is a non-empty string shaped like local@domain.tld

    Example:
        >>> is_valid_email("user@example.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email) is not None
