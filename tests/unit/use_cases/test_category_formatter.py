"""Unit tests for category canonicalization."""

from app.application.use_cases.category_formatter import format_category
from app.domain.catalog import CategoryRules


def test_paint_subcategories_grouped_and_bare_paint_dropped():
    """Test grouping of "Peinture ..." entries with connector removal."""
    result = format_category(["Peinture intérieure", "Peinture de rénovation", "Peinture"])
    assert result == "Peinture : intérieure, rénovation"


def test_bare_paint_first_then_others():
    """Test that bare "Peinture" comes before other categories."""
    assert format_category(["Plomberie", "Peinture"]) == "Peinture, Plomberie"


def test_elided_connector_removed():
    """Test "d’" and "d'" connectors."""
    assert format_category(["Peinture d’extérieur", "Peinture d'intérieur"]) == (
        "Peinture : extérieur, intérieur"
    )


def test_duplicates_removed_in_first_seen_order():
    """Test separate deduplication of paint subcategories and others."""
    result = format_category(
        [
            "Peinture extérieure",
            "Plomberie",
            "Peinture intérieure",
            "Peinture extérieure",
            "Plomberie",
            "Carrelage",
        ]
    )
    assert result == "Peinture : extérieure, intérieure, Plomberie, Carrelage"


def test_catalog_subcategory_without_prefix_counts_as_paint():
    """Test that a bare catalog label like "intérieure" is a paint subcategory."""
    assert format_category(["intérieure"]) == "Peinture : intérieure"


def test_joined_string_from_form_is_accepted():
    """Test the single string sent by the form."""
    assert format_category("Peinture : intérieure, rénovation") == (
        "Peinture : intérieure, rénovation"
    )


def test_output_is_stable_when_formatted_again():
    """Test that formatting a canonical paint value changes nothing."""
    once = format_category(["Peinture intérieure", "Peinture de rénovation"])
    assert format_category(once) == once


def test_empty_and_blank_inputs_yield_empty_string():
    """Test inputs without any recognizable category."""
    assert format_category([]) == ""
    assert format_category(["", "   ", None]) == ""
    assert format_category(None) == ""
    assert format_category("") == ""


def test_single_string_value():
    """Test that a plain string is treated as a one-item list."""
    assert format_category("  Plomberie  ") == "Plomberie"


def test_custom_rules_for_another_locale():
    """Test configurable paint label and connectors."""
    rules = CategoryRules(
        paint_label="Painting",
        connector_patterns=(r"of\s+",),
        known_subcategories=("interior",),
    )
    assert format_category(["Painting of walls", "interior", "Plumbing"], rules) == (
        "Painting : walls, interior, Plumbing"
    )
