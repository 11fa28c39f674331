"""Unit tests for the cached position provider."""

import pytest

from app.adapters.outbound.geolocation.cached_position_provider import CachedPositionProvider
from app.application.ports.position_provider import LocationUnavailableError, Position


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_recent_fix_reused_within_maximum_age():
    """Test cache hit."""
    clock = FakeClock()
    fixes = [Position(47.32, 5.04), Position(47.02, 4.84)]
    calls = []

    async def source() -> Position:
        calls.append(1)
        return fixes[len(calls) - 1]

    provider = CachedPositionProvider(source, clock=clock)

    first = await provider.current_position(maximum_age_seconds=60)
    clock.now = 59
    second = await provider.current_position(maximum_age_seconds=60)
    clock.now = 61
    third = await provider.current_position(maximum_age_seconds=60)

    assert first == second == Position(47.32, 5.04)
    assert third == Position(47.02, 4.84)
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_source_errors_propagate():
    """Test denied permission."""

    async def source() -> Position:
        raise LocationUnavailableError("denied")

    with pytest.raises(LocationUnavailableError):
        await CachedPositionProvider(source).current_position(maximum_age_seconds=60)
