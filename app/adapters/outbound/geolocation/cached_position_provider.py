"""Position provider that reuses a recent fix."""

import time
from collections.abc import Awaitable, Callable
from typing import Optional

from app.application.ports.position_provider import Position, PositionProvider


class CachedPositionProvider(PositionProvider):
    """Wraps a position source and reuses its last fix within the maximum age."""

    def __init__(
        self,
        source: Callable[[], Awaitable[Position]],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize provider.

        Args:
            source: Coroutine function returning a fresh position
                (raises LocationUnavailableError when denied or unavailable)
            clock: Monotonic clock in seconds
        """
        self._source = source
        self._clock = clock
        self._last: Optional[tuple[float, Position]] = None

    async def current_position(self, maximum_age_seconds: float) -> Position:
        """
        Get the current position, possibly from cache.

        Args:
            maximum_age_seconds: Accept a cached position younger than this

        Returns:
            Position
        """
        now = self._clock()
        if self._last is not None:
            taken_at, position = self._last
            if now - taken_at <= maximum_age_seconds:
                return position
        position = await self._source()
        self._last = (self._clock(), position)
        return position
