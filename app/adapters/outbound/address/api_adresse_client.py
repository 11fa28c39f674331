"""api-adresse.data.gouv.fr geocoding client adapter."""

import logging
from typing import Any, Optional

import httpx

from app.application.ports.address_lookup_client import AddressLookupClient
from app.domain.value_objects.address_candidate import AddressCandidate
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_address_lookup


def _text(value: Any) -> str:
    """Scalar property as text, anything else as empty."""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return ""


def _to_candidate(feature: Any) -> Optional[AddressCandidate]:
    """
    Map a GeoJSON feature to a candidate.

    Args:
        feature: One item of the "features" array

    Returns:
        AddressCandidate, or None if it carries neither (postcode and city) nor a label
    """
    props = feature.get("properties") if isinstance(feature, dict) else None
    if not isinstance(props, dict):
        props = {}
    city = _text(props.get("city")) or _text(props.get("municipality"))
    postcode = _text(props.get("postcode"))
    label = _text(props.get("label")) or " ".join(p for p in (postcode, city) if p)
    context = _text(props.get("context"))
    if not ((postcode and city) or label):
        return None
    return AddressCandidate(label=label, postcode=postcode, city=city, context=context)


class ApiAdresseClient(AddressLookupClient):
    """French national address API client using httpx."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize address client.

        Args:
            base_url: API base URL (defaults to settings.address_api_base_url)
            timeout_seconds: Request timeout (defaults to settings.address_api_timeout_seconds)
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = (base_url or settings.address_api_base_url).rstrip("/")
        self._timeout = timeout_seconds or settings.address_api_timeout_seconds
        self._transport = transport

    async def _get_features(self, path: str, params: dict[str, Any]) -> list[Any]:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        features = data.get("features") if isinstance(data, dict) else None
        return features if isinstance(features, list) else []

    async def search(self, query: str, limit: int = 6) -> list[AddressCandidate]:
        """
        Search addresses matching free text.

        Args:
            query: Text typed by the user
            limit: Maximum number of candidates

        Returns:
            Ranked candidates, empty on any failure
        """
        query = query.strip()
        if len(query) < 2:
            return []
        try:
            features = await self._get_features(
                "/search/", {"q": query, "limit": limit, "autocomplete": 1}
            )
            candidates = [c for c in (_to_candidate(f) for f in features) if c is not None]
        except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
            log_address_lookup("search", 0, level=logging.WARNING, error=str(e))
            return []

        log_address_lookup("search", len(candidates), query_length=len(query))
        return candidates[:limit]

    async def reverse(self, lat: float, lon: float) -> Optional[AddressCandidate]:
        """
        Find the address nearest to a position.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Nearest candidate, or None on failure or empty response
        """
        try:
            features = await self._get_features("/reverse/", {"lat": lat, "lon": lon, "limit": 1})
            candidate = _to_candidate(features[0]) if features else None
        except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
            log_address_lookup("reverse", 0, level=logging.WARNING, error=str(e))
            return None

        log_address_lookup("reverse", 1 if candidate else 0)
        return candidate
