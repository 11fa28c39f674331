"""Unit tests for domain value objects and the form session entity."""

import pytest

from app.domain.catalog import STEP_KEYS, STEPS
from app.domain.entities.form_session import FormSession
from app.domain.value_objects.address_candidate import AddressCandidate
from app.domain.value_objects.budget_range import BudgetRange, format_budget_label
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.postal_code import PostalCode


def test_steps_order():
    """Test the step sequence and which steps are optional."""
    assert STEP_KEYS == (
        "categories",
        "name",
        "phone",
        "localisation",
        "budget",
        "photos",
        "description",
        "review",
    )
    assert [step.key for step in STEPS if not step.required] == ["photos", "description"]


def test_budget_parse():
    """Test budget parsing from raw values."""
    assert BudgetRange.parse("1500_3000") is BudgetRange.FROM_1500_TO_3000
    assert BudgetRange.parse(BudgetRange.PLUS_7000) is BudgetRange.PLUS_7000
    assert BudgetRange.parse("beaucoup") is None


def test_budget_labels():
    """Test French labels."""
    assert BudgetRange.LT_500.label == "Moins de 500€"
    assert format_budget_label("7000_plus") == "7000€+"
    assert format_budget_label("") == "-"
    assert format_budget_label(None) == "-"


def test_phone_number_from_raw():
    """Test separators are ignored."""
    phone = PhoneNumber.from_raw("06.12.34.56.78")
    assert phone.digits == "0612345678"


@pytest.mark.parametrize("raw", ["061234567", "06123456789", "", "06 12 34 56 7a"])
def test_phone_number_rejects_wrong_length(raw):
    """Test that anything but ten digits is rejected."""
    with pytest.raises(ValueError):
        PhoneNumber.from_raw(raw)


def test_postal_code_validation():
    """Test five-digit postal codes."""
    assert PostalCode("21000").code == "21000"
    with pytest.raises(ValueError):
        PostalCode("2100")
    with pytest.raises(ValueError):
        PostalCode("2A000")


def test_address_candidate_display_values():
    """Test values derived from a suggestion."""
    candidate = AddressCandidate(
        label="Dijon", postcode="21000", city="Dijon", context="21, Côte-d'Or"
    )

    assert candidate.location_label == "Dijon — 21, Côte-d'Or"
    assert candidate.query_text == "21000 Dijon"
    assert candidate.pill == "21000 — Dijon (21, Côte-d'Or)"


def test_address_candidate_without_context():
    """Test fallbacks when context or city are missing."""
    assert AddressCandidate(label="Quetigny", city="Quetigny").location_label == "Quetigny"
    assert AddressCandidate(label="Lieu-dit").location_label == "Lieu-dit"
    assert AddressCandidate(label="x", postcode="21800", city="Quetigny").pill == "21800 — Quetigny"


def test_form_session_phone_digits():
    """Test phone digits derived from the display value."""
    assert FormSession(phone="06 12 34 56 78").phone_digits == "0612345678"


def test_form_session_reset_keeps_timers():
    """Test reset clears values but keeps the anti-abuse timestamps."""
    session = FormSession(
        categories=["intérieure"],
        name="Jean",
        phone="06 12 34 56 78",
        postal="21000",
        budget=BudgetRange.LT_500,
        photo_names=["a.jpg"],
        step_index=7,
        started_at=10.0,
        last_submit_at=20.0,
    )

    session.reset_fields()

    assert session.categories == []
    assert session.name == ""
    assert session.budget is None
    assert session.photo_names == []
    assert session.step_index == 0
    assert session.started_at == 10.0
    assert session.last_submit_at == 20.0
