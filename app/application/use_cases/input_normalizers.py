"""Keystroke normalizers for intake form fields.

Every function is total: any string input yields a value, never an error.
"""

import re
from collections.abc import Iterable

from app.domain.catalog import PAINT_CATEGORY
from app.domain.value_objects.phone_number import PHONE_DIGITS


def phone_digits(raw: str) -> str:
    """Keep at most ten digits of a phone input."""
    return re.sub(r"\D", "", raw)[:PHONE_DIGITS]


def format_phone_with_spaces(raw: str) -> str:
    """
    Render a phone input as space-separated digit pairs.

    Args:
        raw: Raw user input (may contain letters, dots, dashes...)

    Returns:
        Display value, e.g. "06 12 34 56 78"
    """
    digits = phone_digits(raw)
    return " ".join(digits[i : i + 2] for i in range(0, len(digits), 2))


def only_digits_max(raw: str, max_len: int) -> str:
    """
    Strip non-digits and truncate.

    Args:
        raw: Raw user input
        max_len: Maximum number of digits kept (5 for postal code, 4 for surface)

    Returns:
        Digits-only string of at most max_len characters
    """
    return re.sub(r"\D", "", raw)[: max(max_len, 0)]


def to_name_case(value: str) -> str:
    """
    Capitalize each word of a name while the user types.

    Repeated whitespace collapses to one space and leading spaces are dropped.
    A trailing space is kept so the user can start the next word.
    """
    collapsed = re.sub(r"\s+", " ", value).lstrip()
    return " ".join(word[:1].upper() + word[1:].lower() for word in collapsed.split(" "))


def join_paint_categories(selected: Iterable[str]) -> str:
    """Build the category display value, e.g. "Peinture : intérieure, rénovation"."""
    return f"{PAINT_CATEGORY} : {', '.join(selected)}"
