"""Address lookup client port."""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.value_objects.address_candidate import AddressCandidate


class AddressLookupClient(ABC):
    """Port interface for a geocoding service."""

    @abstractmethod
    async def search(self, query: str, limit: int = 6) -> list[AddressCandidate]:
        """
        Search addresses matching free text.

        Args:
            query: Text typed by the user (postal code, city...)
            limit: Maximum number of candidates

        Returns:
            Ranked candidates, empty on any failure
        """
        pass

    @abstractmethod
    async def reverse(self, lat: float, lon: float) -> Optional[AddressCandidate]:
        """
        Find the address nearest to a position.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Nearest candidate, or None on failure or empty response
        """
        pass
