"""List leads use case for the admin read surface."""

from dataclasses import dataclass

from app.application.dtos.lead import Lead
from app.application.ports.lead_repository import LeadRepository

ADMIN_LIST_LIMIT = 200


def _search_blob(lead: Lead) -> str:
    values = [
        lead.category,
        lead.name,
        lead.phone,
        lead.postal,
        lead.location,
        lead.description,
        lead.photo_name,
    ]
    return " ".join(v for v in values if v).lower()


def filter_leads(leads: list[Lead], query: str = "", only_with_phone: bool = False) -> list[Lead]:
    """
    Filter a lead snapshot.

    Args:
        leads: Snapshot fetched from the repository
        query: Case-insensitive substring searched across the text fields
        only_with_phone: Keep only leads with a non-blank phone

    Returns:
        Matching leads, in snapshot order
    """
    needle = query.strip().lower()
    result = []
    for lead in leads:
        if only_with_phone and not (lead.phone and lead.phone.strip()):
            continue
        if needle and needle not in _search_blob(lead):
            continue
        result.append(lead)
    return result


@dataclass(frozen=True)
class LeadListing:
    """Snapshot size plus the leads matching the filter."""

    total: int
    leads: list[Lead]


class ListLeadsUseCase:
    """Fetch the most recent leads and apply the admin filter."""

    def __init__(self, lead_repository: LeadRepository, limit: int = ADMIN_LIST_LIMIT) -> None:
        """
        Initialize list leads use case.

        Args:
            lead_repository: Lead repository
            limit: Maximum number of leads fetched
        """
        self._lead_repository = lead_repository
        self._limit = limit

    async def execute(self, query: str = "", only_with_phone: bool = False) -> LeadListing:
        """
        Fetch and filter leads.

        Args:
            query: Search text
            only_with_phone: Keep only leads with a phone

        Returns:
            LeadListing
        """
        snapshot = await self._lead_repository.list_recent(limit=self._limit)
        return LeadListing(total=len(snapshot), leads=filter_leads(snapshot, query, only_with_phone))
