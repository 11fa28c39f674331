"""Unit tests for the anti-abuse guard."""

import pytest

from app.application.use_cases.anti_abuse_guard import AntiAbuseGuard, GuardVerdict
from app.application.use_cases.single_slot_timer import CooldownCountdown
from app.domain.entities.form_session import FormSession


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Create fake clock."""
    return FakeClock()


@pytest.fixture
def session():
    """Create empty form session."""
    return FormSession()


@pytest.fixture
def guard(session, clock):
    """Create mounted guard."""
    guard = AntiAbuseGuard(session, clock=clock, cooldown=CooldownCountdown(tick_seconds=10))
    guard.mark_mounted()
    return guard


def test_submission_before_dwell_time_rejected(guard, clock):
    """Test dwell heuristic regardless of field validity."""
    clock.advance(1.4)

    decision = guard.check()

    assert decision.verdict == GuardVerdict.TOO_FAST
    assert decision.allowed is False
    assert "patienter" in decision.message


def test_submission_after_dwell_time_allowed(guard, clock):
    """Test that a patient user passes."""
    clock.advance(1.5)
    assert guard.check().allowed is True


def test_honeypot_checked_first(guard, session):
    """Test that a filled honeypot short-circuits even before dwell time."""
    session.honeypot = "http://spam.example"

    decision = guard.check()

    assert decision.verdict == GuardVerdict.HONEYPOT
    assert decision.message is None


def test_whitespace_honeypot_ignored(guard, session, clock):
    """Test that a blank honeypot does not count."""
    session.honeypot = "   "
    clock.advance(2)
    assert guard.check().allowed is True


def test_throttle_after_accepted_submission(guard, clock):
    """Test the 5 second throttle window."""
    clock.advance(10)
    guard.record_accepted_submission()

    clock.advance(4.9)
    assert guard.check().verdict == GuardVerdict.THROTTLED

    clock.advance(0.2)
    assert guard.check().allowed is True


@pytest.mark.asyncio
async def test_server_cooldown_blocks_until_zero(guard, clock):
    """Test server-issued retry-after."""
    clock.advance(10)
    guard.apply_retry_after(2)

    decision = guard.check()
    assert decision.verdict == GuardVerdict.COOLDOWN
    assert "2 secondes" in decision.message
    assert guard.submit_disabled is True

    guard.cooldown.tick()
    guard.cooldown.tick()

    assert guard.check().allowed is True
    assert guard.submit_disabled is False


def test_rejections_are_logged(session, clock):
    """Test injected logger receives the verdict."""
    calls = []
    guard = AntiAbuseGuard(session, clock=clock, logger=lambda reason, **kw: calls.append(reason))
    guard.mark_mounted()

    guard.check()

    assert calls == ["too_fast"]
