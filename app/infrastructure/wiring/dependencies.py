"""Dependency injection factory functions."""

from app.adapters.outbound.address.api_adresse_client import ApiAdresseClient
from app.adapters.outbound.intake.http_lead_intake_gateway import HttpLeadIntakeGateway
from app.adapters.outbound.lead import (
    InMemoryLeadRepository,
    PostgresLeadRepository,
)
from app.adapters.outbound.rate_limit.noop_submission_rate_limiter import (
    NoOpSubmissionRateLimiter,
)
from app.adapters.outbound.rate_limit.redis_submission_rate_limiter import (
    RedisSubmissionRateLimiter,
)
from app.application.ports.address_lookup_client import AddressLookupClient
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.submission_rate_limiter import SubmissionRateLimiter
from app.application.use_cases.intake_form_client import IntakeFormClient
from app.application.use_cases.list_leads_use_case import ListLeadsUseCase
from app.application.use_cases.submit_lead_use_case import SubmitLeadUseCase
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_guard_rejection, log_submission


def create_lead_repository() -> LeadRepository:
    """
    Factory function to create lead repository.

    Returns:
        LeadRepository instance
    """
    if settings.lead_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when LEAD_REPOSITORY=postgres")
        return PostgresLeadRepository()
    else:
        return InMemoryLeadRepository()


def create_address_lookup_client() -> AddressLookupClient:
    """
    Factory function to create the geocoding client.

    Returns:
        AddressLookupClient instance
    """
    return ApiAdresseClient()


def create_submission_rate_limiter() -> SubmissionRateLimiter:
    """
    Factory function to create submission rate limiter.

    Returns:
        SubmissionRateLimiter instance (Redis or NoOp)
    """
    if not settings.rate_limit_enabled or not settings.redis_url:
        return NoOpSubmissionRateLimiter()

    return RedisSubmissionRateLimiter(
        settings.redis_url,
        max_submissions=settings.rate_limit_max_submissions,
        window_seconds=settings.rate_limit_window_seconds,
    )


def create_submit_lead_use_case(lead_repository: LeadRepository) -> SubmitLeadUseCase:
    """
    Factory function to create SubmitLeadUseCase with dependencies.

    Args:
        lead_repository: Repository shared with the admin listing

    Returns:
        SubmitLeadUseCase instance
    """
    return SubmitLeadUseCase(lead_repository, logger=log_submission)


def create_list_leads_use_case(lead_repository: LeadRepository) -> ListLeadsUseCase:
    """
    Factory function to create ListLeadsUseCase.

    Args:
        lead_repository: Repository shared with the intake endpoint

    Returns:
        ListLeadsUseCase instance
    """
    return ListLeadsUseCase(lead_repository, limit=settings.admin_list_limit)


def create_intake_form_client() -> IntakeFormClient:
    """
    Factory function to create a client-side intake form session.

    Returns:
        IntakeFormClient posting to settings.intake_endpoint_url
    """
    return IntakeFormClient(
        gateway=HttpLeadIntakeGateway(),
        address_client=create_address_lookup_client(),
        logger=log_guard_rejection,
    )
