"""Unit tests for input normalizers."""

import pytest

from app.application.use_cases.input_normalizers import (
    format_phone_with_spaces,
    join_paint_categories,
    only_digits_max,
    phone_digits,
    to_name_case,
)


def test_format_phone_groups_digits_in_pairs():
    """Test that a full number is rendered in five pairs."""
    assert format_phone_with_spaces("0612345678") == "06 12 34 56 78"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("06.12.34.56.78", "06 12 34 56 78"),
        ("+33 6 12 34 56 78 99", "33 61 23 45 67"),
        ("061", "06 1"),
        ("abc", ""),
        ("", ""),
    ],
)
def test_format_phone_strips_separators_and_truncates(raw, expected):
    """Test phone formatter on messy input."""
    assert format_phone_with_spaces(raw) == expected


def test_format_phone_output_contains_only_digits_and_spaces():
    """Test that the display value never holds more than 10 digits."""
    formatted = format_phone_with_spaces("tel: 06-12-34-56-78-90-12 !")
    assert set(formatted) <= set("0123456789 ")
    assert len(formatted.replace(" ", "")) == 10


def test_phone_digits_caps_at_ten():
    """Test digits-only view."""
    assert phone_digits("06 12 34 56 78 9") == "0612345678"


def test_only_digits_max_postal():
    """Test digit capper with postal code length."""
    assert only_digits_max("12a3b45678901", 5) == "12345"


def test_only_digits_max_surface():
    """Test digit capper with surface length."""
    assert only_digits_max("120 m²", 4) == "120"
    assert only_digits_max("99999", 4) == "9999"


def test_only_digits_max_zero_or_negative_length():
    """Test digit capper never returns more than requested."""
    assert only_digits_max("123", 0) == ""
    assert only_digits_max("123", -1) == ""


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("jean dupont", "Jean Dupont"),
        ("  JEAN   DUPONT", "Jean Dupont"),
        ("marie-claire", "Marie-claire"),
        ("jean ", "Jean "),
        ("", ""),
    ],
)
def test_to_name_case(raw, expected):
    """Test name casing while typing."""
    assert to_name_case(raw) == expected


def test_join_paint_categories_keeps_selection_order():
    """Test category joiner."""
    assert (
        join_paint_categories(["rénovation", "intérieure"]) == "Peinture : rénovation, intérieure"
    )
