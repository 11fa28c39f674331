"""Build the intake payload from a completed form session."""

from app.application.dtos.intake import LeadIntakePayload
from app.application.use_cases.input_normalizers import join_paint_categories
from app.domain.catalog import PHOTO_SEPARATOR
from app.domain.entities.form_session import FormSession
from app.domain.value_objects.phone_number import PHONE_DIGITS
from app.domain.value_objects.postal_code import POSTAL_DIGITS


def missing_required_fields(session: FormSession) -> list[str]:
    """
    List required fields that are still invalid before sending.

    Args:
        session: Form session

    Returns:
        Field names, empty when the session can be submitted
    """
    missing = []
    if not session.categories:
        missing.append("category")
    if not session.name.strip():
        missing.append("name")
    if len(session.phone_digits) != PHONE_DIGITS:
        missing.append("phone")
    if len(session.postal) != POSTAL_DIGITS:
        missing.append("postal")
    if session.budget is None:
        missing.append("budget")
    return missing


def build_payload(session: FormSession) -> LeadIntakePayload:
    """
    Assemble the JSON payload posted to the intake endpoint.

    Args:
        session: Form session with validated values

    Returns:
        LeadIntakePayload
    """
    return LeadIntakePayload(
        honeypot=session.honeypot,
        category=join_paint_categories(session.categories),
        name=session.name.strip(),
        phone=session.phone_digits,
        postal=session.postal,
        surface=session.surface,
        location=session.location,
        budget=session.budget.value if session.budget else "",
        description=session.description,
        photo_name=PHOTO_SEPARATOR.join(session.photo_names),
    )
