"""Submit lead use case (server side of the intake endpoint)."""

import re
from collections.abc import Callable
from typing import Any, Optional

from app.application.dtos.intake import IntakeResponse, IntakeResult
from app.application.dtos.lead import NewLead
from app.application.ports.lead_repository import LeadRepository
from app.application.use_cases.category_formatter import format_category
from app.application.use_cases.input_normalizers import only_digits_max
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.catalog import FRENCH_CATEGORY_RULES, CategoryRules
from app.domain.value_objects.budget_range import BudgetRange
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.postal_code import PostalCode

REQUIRED_FIELDS = ("category", "name", "phone", "postal")
SURFACE_DIGITS = 4


def _is_missing(value: Any) -> bool:
    """Absent, null, empty string or false. An empty list counts as present."""
    if isinstance(value, (list, tuple)):
        return False
    return value is None or value is False or value == ""


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value is False:
        return None
    text = str(value).strip()
    return text or None


def _capitalize_first(name: str) -> str:
    """Upper-case the first letter, leave the rest as typed."""
    return name[:1].upper() + name[1:]


class SubmitLeadUseCase:
    """Validate, normalize and persist one lead."""

    def __init__(
        self,
        lead_repository: LeadRepository,
        category_rules: CategoryRules = FRENCH_CATEGORY_RULES,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize submit lead use case.

        Args:
            lead_repository: Repository where leads are inserted
            category_rules: Locale rules for category canonicalization
            logger: Optional logger function (request_id, outcome, status_code, **kwargs)
        """
        self._lead_repository = lead_repository
        self._category_rules = category_rules
        self._logger = logger

    def _log(self, request_id: str, outcome: str, status_code: int, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, outcome, status_code, **kwargs)

    def _result(
        self,
        request_id: str,
        outcome: str,
        status_code: int,
        error: Optional[str] = None,
        persisted: bool = False,
        **log_fields: Any,
    ) -> IntakeResult:
        self._log(request_id, outcome, status_code, **log_fields)
        return IntakeResult(
            status_code=status_code,
            response=IntakeResponse(ok=error is None, error=error),
            persisted=persisted,
        )

    async def execute(self, body: Any, request_id: str = "unknown") -> IntakeResult:
        """
        Handle a parsed intake body.

        Args:
            body: Decoded JSON body (anything that is not an object counts as empty)
            request_id: Identifier used for log correlation

        Returns:
            IntakeResult with HTTP status and response body
        """
        data: dict[str, Any] = body if isinstance(body, dict) else {}

        honeypot = data.get("honeypot")
        if honeypot and str(honeypot).strip():
            return self._result(request_id, "honeypot", 200)

        missing = [field for field in REQUIRED_FIELDS if _is_missing(data.get(field))]
        if missing:
            return self._result(
                request_id, "missing_fields", 400, UserMessagesFR.REQUIRED_FIELDS, missing=missing
            )

        category = format_category(data["category"], self._category_rules)
        if not category:
            return self._result(request_id, "empty_category", 400, UserMessagesFR.SELECT_CATEGORY)

        try:
            phone = PhoneNumber.from_raw(str(data["phone"]))
        except ValueError:
            return self._result(request_id, "invalid_phone", 400, UserMessagesFR.INVALID_PHONE)

        try:
            postal = PostalCode(re.sub(r"\s", "", str(data["postal"])))
        except ValueError:
            return self._result(request_id, "invalid_postal", 400, UserMessagesFR.INVALID_POSTAL)

        name = _capitalize_first(str(data["name"]).strip())
        if not name:
            return self._result(
                request_id, "missing_fields", 400, UserMessagesFR.REQUIRED_FIELDS, missing=["name"]
            )

        surface = only_digits_max(str(data.get("surface") or ""), SURFACE_DIGITS)
        budget = BudgetRange.parse(data.get("budget")) if data.get("budget") else None

        lead = NewLead(
            category=category,
            name=name,
            phone=phone.digits,
            postal=postal.code,
            surface=surface or None,
            location=_optional_text(data.get("location")),
            budget=budget.value if budget else None,
            description=_optional_text(data.get("description")),
            photo_name=_optional_text(data.get("photoName")),
        )

        try:
            stored = await self._lead_repository.add(lead)
        except Exception as err:
            return self._result(
                request_id,
                "db_error",
                500,
                UserMessagesFR.DB_ERROR,
                error_type=type(err).__name__,
                error_detail=str(err),
            )

        return self._result(
            request_id, "stored", 200, persisted=True, lead_id=stored.id, category=category
        )
