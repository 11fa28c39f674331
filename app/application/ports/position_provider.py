"""Device position provider port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class LocationUnavailableError(Exception):
    """Raised when the position cannot be obtained (denied, unsupported...)."""


@dataclass(frozen=True)
class Position:
    """Latitude/longitude pair."""

    latitude: float
    longitude: float


class PositionProvider(ABC):
    """Port interface for the platform location service."""

    @abstractmethod
    async def current_position(self, maximum_age_seconds: float) -> Position:
        """
        Get the current position.

        Args:
            maximum_age_seconds: Accept a cached position younger than this

        Returns:
            Current position

        Raises:
            LocationUnavailableError: If permission is denied or no fix is available
        """
        pass
