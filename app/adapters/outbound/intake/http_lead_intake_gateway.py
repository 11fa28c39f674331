"""HTTP gateway posting leads to the intake endpoint."""

from typing import Optional

import httpx
from pydantic import ValidationError

from app.application.dtos.intake import IntakeResponse, LeadIntakePayload
from app.application.ports.lead_intake_gateway import LeadIntakeGateway, LeadIntakeTransportError
from app.infrastructure.config.settings import settings


class HttpLeadIntakeGateway(LeadIntakeGateway):
    """httpx implementation of the intake gateway."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize gateway.

        Args:
            endpoint_url: Intake endpoint URL (defaults to settings.intake_endpoint_url)
            timeout_seconds: Request timeout (defaults to settings.intake_timeout_seconds)
            transport: Optional httpx transport (used by tests)
        """
        self._endpoint_url = endpoint_url or settings.intake_endpoint_url
        self._timeout = timeout_seconds or settings.intake_timeout_seconds
        self._transport = transport

    async def submit(self, payload: LeadIntakePayload) -> tuple[int, IntakeResponse]:
        """
        Post a lead as JSON.

        Args:
            payload: Formatted intake payload

        Returns:
            HTTP status code and parsed response body

        Raises:
            LeadIntakeTransportError: On network failure or malformed response
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._endpoint_url, json=payload.model_dump(by_alias=True)
                )
            body = IntakeResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            raise LeadIntakeTransportError(f"Intake request failed: {str(e)}") from e

        retry_after = body.retry_after
        if response.status_code == 429 and retry_after is None:
            header = response.headers.get("Retry-After", "")
            retry_after = int(header) if header.isdigit() else None
            body = IntakeResponse(ok=body.ok, error=body.error, retryAfter=retry_after)

        return response.status_code, body
