"""Client-side driver for one intake form session."""

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from app.application.ports.address_lookup_client import AddressLookupClient
from app.application.ports.lead_intake_gateway import LeadIntakeGateway, LeadIntakeTransportError
from app.application.use_cases.address_autocomplete import AddressAutocomplete
from app.application.use_cases.anti_abuse_guard import AntiAbuseGuard, GuardVerdict
from app.application.use_cases.input_normalizers import (
    format_phone_with_spaces,
    only_digits_max,
    to_name_case,
)
from app.application.use_cases.single_slot_timer import CooldownCountdown
from app.application.use_cases.step_controller import StepController
from app.application.use_cases.submission_formatter import build_payload, missing_required_fields
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.catalog import MAX_PHOTOS
from app.domain.entities.form_session import FormSession
from app.domain.value_objects.postal_code import POSTAL_DIGITS

SURFACE_DIGITS = 4


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of a submit attempt as seen by the visitor."""

    ok: bool
    sent: bool  # True if the request reached the network layer
    message: Optional[str] = None


class IntakeFormClient:
    """
    Holds a FormSession and wires normalizers, step controller, guard and
    address autocompletion around it.
    """

    def __init__(
        self,
        gateway: LeadIntakeGateway,
        address_client: AddressLookupClient,
        clock: Callable[[], float] = time.monotonic,
        session: Optional[FormSession] = None,
        cooldown: Optional[CooldownCountdown] = None,
        auto_advance_seconds: Optional[float] = None,
        debounce_seconds: Optional[float] = None,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize client and mark the form as mounted.

        Args:
            gateway: Intake endpoint gateway
            address_client: Geocoding client for the localisation step
            clock: Monotonic clock in seconds
            session: Existing session (a new one is created if omitted)
            cooldown: Countdown for server retry-after windows
            auto_advance_seconds: Override budget auto-advance delay
            debounce_seconds: Override address search debounce delay
            logger: Optional guard logger function (reason, **kwargs)
        """
        self.session = session or FormSession()
        self._gateway = gateway
        step_kwargs = {}
        if auto_advance_seconds is not None:
            step_kwargs["auto_advance_seconds"] = auto_advance_seconds
        self.steps = StepController(self.session, **step_kwargs)
        self.guard = AntiAbuseGuard(self.session, clock=clock, cooldown=cooldown, logger=logger)
        address_kwargs = {}
        if debounce_seconds is not None:
            address_kwargs["debounce_seconds"] = debounce_seconds
        self.address = AddressAutocomplete(self.session, address_client, **address_kwargs)
        self.guard.mark_mounted()

    # Field input

    def toggle_category(self, value: str) -> None:
        """Select or unselect a paint subcategory."""
        if value in self.session.categories:
            self.session.categories = [c for c in self.session.categories if c != value]
        else:
            self.session.categories = [*self.session.categories, value]
        self.session.error_message = ""

    def set_name(self, raw: str) -> None:
        """Store the name with each word capitalized."""
        self.session.name = to_name_case(raw)

    def set_phone(self, raw: str) -> None:
        """Store the phone grouped in digit pairs."""
        self.session.phone = format_phone_with_spaces(raw)

    def set_postal(self, raw: str) -> None:
        """Store a postal code typed directly (digits only, at most 5)."""
        self.session.postal = only_digits_max(raw, POSTAL_DIGITS)

    def set_surface(self, raw: str) -> None:
        """Store the surface in m² (digits only, at most 4)."""
        self.session.surface = only_digits_max(raw, SURFACE_DIGITS)

    def set_location(self, value: str) -> None:
        """Store the free-text city/zone."""
        self.session.location = value

    def set_description(self, value: str) -> None:
        """Store the project description."""
        self.session.description = value

    def set_honeypot(self, value: str) -> None:
        """Hidden field, only filled by bots."""
        self.session.honeypot = value

    def add_photos(self, files: Iterable[tuple[str, str]]) -> None:
        """
        Keep image file names, up to four in total.

        Args:
            files: (file name, content type) pairs
        """
        incoming = [name for name, content_type in files if content_type.startswith("image/")]
        merged = [*self.session.photo_names, *incoming[:MAX_PHOTOS]]
        self.session.photo_names = merged[:MAX_PHOTOS]

    def remove_photo(self, file_name: str) -> None:
        """Forget a photo by file name."""
        self.session.photo_names = [n for n in self.session.photo_names if n != file_name]

    # Submission

    @property
    def submit_disabled(self) -> bool:
        """Check if the submit control is disabled (loading or cooldown)."""
        return self.session.loading or self.guard.submit_disabled

    async def submit(self) -> SubmissionOutcome:
        """
        Run the guard and final validation, then post the lead.

        Returns:
            SubmissionOutcome describing what the visitor sees
        """
        if self.session.loading:
            return SubmissionOutcome(ok=False, sent=False, message=UserMessagesFR.SUBMITTING)

        decision = self.guard.check()
        if decision.verdict == GuardVerdict.HONEYPOT:
            return SubmissionOutcome(ok=True, sent=False)
        if not decision.allowed:
            return self._reject(decision.message or UserMessagesFR.STEP_DEFAULT)

        if missing_required_fields(self.session):
            return self._reject(UserMessagesFR.REQUIRED_FIELDS)

        self.session.loading = True
        self.session.error_message = ""
        payload = build_payload(self.session)

        try:
            status_code, response = await self._gateway.submit(payload)
        except LeadIntakeTransportError:
            return self._reject(UserMessagesFR.SERVER_ERROR, sent=True)
        finally:
            self.session.loading = False

        if status_code == 429:
            self.guard.apply_retry_after(response.retry_after or 0)
            remaining = self.guard.cooldown.remaining
            message = (
                UserMessagesFR.cooldown(remaining) if remaining else UserMessagesFR.RATE_LIMITED
            )
            return self._reject(message, sent=True)

        if status_code >= 400 or not response.ok:
            return self._reject(response.error or UserMessagesFR.SERVER_ERROR, sent=True)

        self.guard.record_accepted_submission()
        self.address.cancel()
        self.steps.reset()
        self.session.reset_fields()
        return SubmissionOutcome(ok=True, sent=True)

    def _reject(self, message: str, sent: bool = False) -> SubmissionOutcome:
        self.session.error_message = message
        return SubmissionOutcome(ok=False, sent=sent, message=message)
