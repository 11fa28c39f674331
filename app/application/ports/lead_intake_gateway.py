"""Lead intake gateway port (client side of the intake endpoint)."""

from abc import ABC, abstractmethod

from app.application.dtos.intake import IntakeResponse, LeadIntakePayload


class LeadIntakeTransportError(Exception):
    """Raised when the intake endpoint cannot be reached or answers garbage."""


class LeadIntakeGateway(ABC):
    """Port interface for posting a lead to the intake endpoint."""

    @abstractmethod
    async def submit(self, payload: LeadIntakePayload) -> tuple[int, IntakeResponse]:
        """
        Post a lead.

        Args:
            payload: Formatted intake payload

        Returns:
            HTTP status code and parsed response body

        Raises:
            LeadIntakeTransportError: On network failure or malformed response
        """
        pass
