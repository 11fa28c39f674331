"""HTTP routes."""

import json
import logging
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from app.application.dtos.lead import Lead
from app.application.use_cases.user_messages_fr import UserMessagesFR
from app.domain.value_objects.budget_range import format_budget_label
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event, log_submission, logger
from app.infrastructure.wiring.dependencies import (
    create_address_lookup_client,
    create_lead_repository,
    create_list_leads_use_case,
    create_submission_rate_limiter,
    create_submit_lead_use_case,
)

router = APIRouter()

# Create use case instances (wired with dependencies)
_lead_repository = create_lead_repository()
_submit_lead_use_case = create_submit_lead_use_case(_lead_repository)
_list_leads_use_case = create_list_leads_use_case(_lead_repository)
_address_client = create_address_lookup_client()
_rate_limiter = create_submission_rate_limiter()


def _parse_body(raw: bytes) -> Any:
    """Decode a JSON body; anything malformed counts as an empty payload."""
    try:
        return json.loads(raw) if raw else {}
    except ValueError:
        return {}


def _client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post("/api/publier-projet")
async def publier_projet(request: Request) -> JSONResponse:
    """
    Receive a lead from the intake form.

    Args:
        request: FastAPI request (JSON body read manually so malformed input is tolerated)

    Returns:
        {"ok": true} on success, {"ok": false, "error": ...} with 400/429/500 otherwise
    """
    request_id = str(uuid4())

    try:
        retry_after = await _rate_limiter.hit(_client_key(request))
    except Exception as err:
        # Limiter outage must not block intake
        logger.warning(f"Rate limiter unavailable: {str(err)}")
        retry_after = None

    if retry_after is not None:
        log_submission(request_id, "rate_limited", 429, retry_after=retry_after)
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content={"ok": False, "error": UserMessagesFR.RATE_LIMITED, "retryAfter": retry_after},
            headers={"Retry-After": str(retry_after)},
        )

    try:
        body = _parse_body(await request.body())
        result = await _submit_lead_use_case.execute(body, request_id=request_id)
    except Exception as err:
        logger.exception(f"Unexpected error while handling lead {request_id}: {str(err)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": UserMessagesFR.SERVER_ERROR},
        )

    return JSONResponse(
        status_code=result.status_code,
        content=result.response.model_dump(by_alias=True, exclude_none=True),
    )


@router.get("/api/address/search", status_code=status.HTTP_200_OK)
async def address_search(q: str = Query("", max_length=200)) -> dict:
    """
    Postal code / city suggestions for the localisation step.

    Args:
        q: Search text (at least 2 characters, shorter queries return no results)

    Returns:
        Suggestions list
    """
    results = await _address_client.search(q, limit=settings.address_search_limit)
    return {"results": [r.to_dict() for r in results]}


@router.get("/api/address/reverse", status_code=status.HTTP_200_OK)
async def address_reverse(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
) -> dict:
    """
    Nearest address for a GPS position.

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        Nearest candidate, or null with an error message when unavailable
    """
    candidate = await _address_client.reverse(lat, lon)
    if candidate is None:
        return {"result": None, "error": UserMessagesFR.LOCATION_NOT_FOUND}
    return {"result": candidate.to_dict()}


@router.get("/admin/leads", status_code=status.HTTP_200_OK)
async def list_leads(q: str = "", only_with_phone: bool = False) -> dict:
    """
    List the most recent leads (only enabled if ADMIN_ENABLED=true).

    Args:
        q: Case-insensitive search across the lead text fields
        only_with_phone: Keep only leads with a phone number

    Returns:
        Snapshot size, number shown and matching leads

    Raises:
        HTTPException: 404 if ADMIN_ENABLED is disabled, 503 if the store is unavailable
    """
    if not settings.admin_enabled:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Admin endpoint is disabled",
        )

    try:
        listing = await _list_leads_use_case.execute(query=q, only_with_phone=only_with_phone)
    except Exception as err:
        log_event("admin", level=logging.ERROR, error=str(err))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Lead store unavailable",
        ) from err

    return {
        "total": listing.total,
        "shown": len(listing.leads),
        "leads": [_lead_to_dict(lead) for lead in listing.leads],
    }


def _lead_to_dict(lead: Lead) -> dict[str, Any]:
    data = lead.model_dump()
    data["created_at"] = lead.created_at.isoformat()
    data["budget_label"] = format_budget_label(lead.budget)
    return data


async def close_resources() -> None:
    """Release connections held by the route dependencies."""
    await _rate_limiter.close()
