"""Postal code autocompletion and "use my location" for the localisation step."""

import asyncio
from typing import Optional

from app.application.ports.address_lookup_client import AddressLookupClient
from app.application.ports.position_provider import PositionProvider
from app.application.use_cases.single_slot_timer import SingleSlotTimer
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.entities.form_session import FormSession
from app.domain.value_objects.address_candidate import AddressCandidate

DEBOUNCE_SECONDS = 0.22
MIN_QUERY_LENGTH = 2
GPS_TIMEOUT_SECONDS = 12.0
GPS_MAXIMUM_AGE_SECONDS = 60.0


class AddressAutocomplete:
    """Debounced address search bound to one form session."""

    def __init__(
        self,
        session: FormSession,
        client: AddressLookupClient,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        search_limit: int = 6,
        gps_timeout_seconds: float = GPS_TIMEOUT_SECONDS,
    ) -> None:
        """
        Initialize autocomplete.

        Args:
            session: Form session receiving query, results and selection
            client: Geocoding client
            debounce_seconds: Input quiescence required before a lookup
            search_limit: Maximum number of suggestions
            gps_timeout_seconds: Timeout for obtaining the device position
        """
        self._session = session
        self._client = client
        self._debounce = SingleSlotTimer(debounce_seconds)
        self._search_limit = search_limit
        self._gps_timeout = gps_timeout_seconds
        self._inflight: Optional[asyncio.Task] = None
        self.open = False
        self.searching = False
        self.locating = False

    def on_query_change(self, value: str) -> None:
        """
        Handle a keystroke in the postal code box.

        Cancels the pending lookup and schedules a new one. Must be called from
        a running event loop.

        Args:
            value: Current text of the search box
        """
        self._session.cp_query = value
        self._session.cp_pill = ""
        self._session.error_message = ""
        self._debounce.schedule(lambda: self._start_search(value))

    async def search_now(self, query: str) -> list[AddressCandidate]:
        """
        Look up suggestions immediately.

        Args:
            query: Search text

        Returns:
            Suggestions stored on the session (empty for queries under 2 chars)
        """
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            self._session.cp_results = []
            self.open = False
            return []

        self.searching = True
        self.open = True
        try:
            results = await self._client.search(query, limit=self._search_limit)
        finally:
            self.searching = False
        self._session.cp_results = results
        return results

    async def wait_idle(self) -> None:
        """Wait for the in-flight lookup, if any."""
        if self._inflight is not None:
            try:
                await self._inflight
            except asyncio.CancelledError:
                pass

    def apply_selection(self, item: AddressCandidate) -> None:
        """
        Fill postal code and location from a suggestion.

        Args:
            item: Chosen suggestion
        """
        if item.postcode:
            self._session.postal = item.postcode
        self._session.location = item.location_label
        self._session.cp_query = item.query_text
        self._session.cp_pill = item.pill
        self._session.error_message = ""
        self.open = False

    def clear_selection(self) -> None:
        """Forget the chosen location so the user can search again."""
        self._session.cp_pill = ""
        self._session.cp_query = ""
        self._session.postal = ""
        self._session.location = ""

    async def use_my_location(self, provider: Optional[PositionProvider]) -> Optional[str]:
        """
        Fill the localisation from the device position.

        Args:
            provider: Platform location service, None when unsupported

        Returns:
            None on success, a French "location unavailable" message otherwise
        """
        self._session.error_message = ""
        if provider is None:
            return self._fail(UserMessagesFR.LOCATION_UNAVAILABLE)

        self.locating = True
        try:
            try:
                position = await asyncio.wait_for(
                    provider.current_position(maximum_age_seconds=GPS_MAXIMUM_AGE_SECONDS),
                    timeout=self._gps_timeout,
                )
            except Exception:
                # Denied permission, timeout or a crashed platform service
                return self._fail(UserMessagesFR.LOCATION_UNAVAILABLE)

            try:
                candidate = await self._client.reverse(position.latitude, position.longitude)
            except Exception:
                return self._fail(UserMessagesFR.GPS_ERROR)
        finally:
            self.locating = False

        if candidate is None or not (candidate.postcode or candidate.city):
            return self._fail(UserMessagesFR.LOCATION_NOT_FOUND)

        if candidate.postcode:
            self._session.postal = candidate.postcode
        if candidate.city:
            self._session.location = candidate.location_label
        self._session.cp_query = candidate.query_text
        self._session.cp_pill = candidate.pill
        return None

    def cancel(self) -> None:
        """Drop the pending and in-flight lookups."""
        self._debounce.cancel()
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

    def _start_search(self, query: str) -> None:
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = asyncio.ensure_future(self.search_now(query))

    def _fail(self, message: str) -> str:
        self._session.cp_pill = ""
        self._session.error_message = message
        return message
