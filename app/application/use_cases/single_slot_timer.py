"""Single-slot cancellable timers built on the running asyncio loop."""

import asyncio
from collections.abc import Callable
from typing import Optional


class SingleSlotTimer:
    """
    Holds at most one pending callback.

    Scheduling a new callback cancels the pending one, so two callbacks of the
    same trigger site can never both fire.
    """

    def __init__(self, delay_seconds: float) -> None:
        """
        Initialize timer.

        Args:
            delay_seconds: Delay applied to every scheduled callback
        """
        self._delay = delay_seconds
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        """Check if a callback is waiting to fire."""
        return self._handle is not None

    def schedule(self, callback: Callable[[], None]) -> None:
        """
        Schedule callback after the delay, superseding any pending one.

        Args:
            callback: Function called on the event loop thread
        """
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, callback)

    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()


class CooldownCountdown:
    """Server-issued cooldown that ticks down once per second."""

    def __init__(self, tick_seconds: float = 1.0) -> None:
        """
        Initialize countdown.

        Args:
            tick_seconds: Interval between two decrements
        """
        self._timer = SingleSlotTimer(tick_seconds)
        self._remaining = 0

    @property
    def remaining(self) -> int:
        """Seconds left before a new submission is allowed."""
        return self._remaining

    @property
    def active(self) -> bool:
        """Check if submissions are currently blocked."""
        return self._remaining > 0

    def start(self, seconds: int) -> None:
        """
        Start or extend the countdown.

        A shorter duration never cuts a longer countdown already running.

        Args:
            seconds: Retry-after duration provided by the server
        """
        seconds = max(int(seconds), 0)
        if seconds <= self._remaining:
            return
        self._remaining = seconds
        self._timer.schedule(self.tick)

    def tick(self) -> None:
        """Decrement by one second and reschedule until zero."""
        if self._remaining > 0:
            self._remaining -= 1
        if self._remaining > 0:
            self._timer.schedule(self.tick)
        else:
            self._timer.cancel()

    def stop(self) -> None:
        """Clear the countdown."""
        self._remaining = 0
        self._timer.cancel()
