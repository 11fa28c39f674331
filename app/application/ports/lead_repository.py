"""Lead repository port."""

from abc import ABC, abstractmethod

from app.application.dtos.lead import Lead, NewLead


class LeadRepository(ABC):
    """Port interface for lead repository."""

    @abstractmethod
    async def add(self, lead: NewLead) -> Lead:
        """
        Insert a new lead.

        Args:
            lead: Normalized lead to insert

        Returns:
            Persisted lead with id and created_at assigned
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 200) -> list[Lead]:
        """
        List the most recent leads.

        Args:
            limit: Maximum number of leads returned

        Returns:
            Leads ordered by created_at descending
        """
        pass
