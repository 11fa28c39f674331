"""In-memory lead repository adapter."""

from datetime import datetime, timezone
from itertools import count

from app.application.dtos.lead import Lead, NewLead
from app.application.ports.lead_repository import LeadRepository


class InMemoryLeadRepository(LeadRepository):
    """In-memory implementation of lead repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: list[Lead] = []
        self._ids = count(1)

    async def add(self, lead: NewLead) -> Lead:
        """
        Insert a lead with the next id and the current timestamp.

        Args:
            lead: Normalized lead to insert

        Returns:
            Persisted lead
        """
        stored = Lead(
            **lead.model_dump(),
            id=next(self._ids),
            created_at=datetime.now(timezone.utc),
        )
        self._storage.append(stored)
        return stored

    async def list_recent(self, limit: int = 200) -> list[Lead]:
        """
        List the most recent leads.

        Args:
            limit: Maximum number of leads returned

        Returns:
            Leads newest first
        """
        ordered = sorted(self._storage, key=lambda lead: (lead.created_at, lead.id), reverse=True)
        return ordered[:limit]
