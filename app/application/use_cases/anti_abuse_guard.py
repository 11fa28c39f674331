"""Client-side anti-abuse heuristics run before a submission is sent."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.application.use_cases.single_slot_timer import CooldownCountdown
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.entities.form_session import FormSession

MIN_DWELL_SECONDS = 1.5
THROTTLE_SECONDS = 5.0


class GuardVerdict(str, Enum):
    """Result of the guard checks."""

    ALLOW = "allow"
    HONEYPOT = "honeypot"  # Report success, send nothing
    TOO_FAST = "too_fast"
    THROTTLED = "throttled"
    COOLDOWN = "cooldown"


@dataclass(frozen=True)
class GuardDecision:
    """Verdict plus the message shown to the user."""

    verdict: GuardVerdict
    message: Optional[str] = None

    @property
    def allowed(self) -> bool:
        """Check if the submission may be sent."""
        return self.verdict == GuardVerdict.ALLOW


class AntiAbuseGuard:
    """
    Timing and honeypot heuristics.

    These checks are advisory; the intake endpoint remains the authority, and a
    429 answer always starts (or extends) the cooldown.
    """

    def __init__(
        self,
        session: FormSession,
        clock: Callable[[], float] = time.monotonic,
        cooldown: Optional[CooldownCountdown] = None,
        min_dwell_seconds: float = MIN_DWELL_SECONDS,
        throttle_seconds: float = THROTTLE_SECONDS,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize guard.

        Args:
            session: Form session holding the anti-abuse timestamps
            clock: Monotonic clock in seconds
            cooldown: Countdown for server-issued retry-after windows
            min_dwell_seconds: Minimum time between mount and submission
            throttle_seconds: Minimum time between two accepted submissions
            logger: Optional logger function (reason, **kwargs)
        """
        self._session = session
        self._clock = clock
        self._cooldown = cooldown or CooldownCountdown()
        self._min_dwell = min_dwell_seconds
        self._throttle = throttle_seconds
        self._logger = logger

    @property
    def cooldown(self) -> CooldownCountdown:
        """Get the server cooldown countdown."""
        return self._cooldown

    @property
    def submit_disabled(self) -> bool:
        """Check if the submit control must be disabled."""
        return self._cooldown.active

    def _log(self, reason: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(reason, **kwargs)

    def mark_mounted(self) -> None:
        """Record the moment the form was displayed."""
        self._session.started_at = self._clock()

    def check(self) -> GuardDecision:
        """
        Run the checks in order, stopping at the first failure.

        Returns:
            GuardDecision with the verdict and optional user message
        """
        if self._session.honeypot.strip():
            self._log(GuardVerdict.HONEYPOT.value)
            return GuardDecision(GuardVerdict.HONEYPOT)

        now = self._clock()
        if now - self._session.started_at < self._min_dwell:
            self._log(GuardVerdict.TOO_FAST.value)
            return GuardDecision(GuardVerdict.TOO_FAST, UserMessagesFR.TOO_FAST)

        last = self._session.last_submit_at
        if last is not None and now - last < self._throttle:
            self._log(GuardVerdict.THROTTLED.value)
            return GuardDecision(GuardVerdict.THROTTLED, UserMessagesFR.THROTTLED)

        if self._cooldown.active:
            self._log(GuardVerdict.COOLDOWN.value, remaining=self._cooldown.remaining)
            return GuardDecision(
                GuardVerdict.COOLDOWN, UserMessagesFR.cooldown(self._cooldown.remaining)
            )

        return GuardDecision(GuardVerdict.ALLOW)

    def record_accepted_submission(self) -> None:
        """Start the throttle window after the server accepted a lead."""
        self._session.last_submit_at = self._clock()

    def apply_retry_after(self, seconds: int) -> None:
        """
        Honor a server rate-limit answer.

        Args:
            seconds: Retry-after duration from the server
        """
        self._cooldown.start(seconds)
