"""Unit tests for dependency wiring and application startup."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from app.adapters.outbound.intake.http_lead_intake_gateway import HttpLeadIntakeGateway
from app.adapters.outbound.lead import InMemoryLeadRepository, PostgresLeadRepository
from app.adapters.outbound.rate_limit.noop_submission_rate_limiter import (
    NoOpSubmissionRateLimiter,
)
from app.adapters.outbound.rate_limit.redis_submission_rate_limiter import (
    RedisSubmissionRateLimiter,
)
from app.application.use_cases.intake_form_client import IntakeFormClient
from app.infrastructure.config.settings import settings
from app.infrastructure.wiring.dependencies import (
    create_intake_form_client,
    create_lead_repository,
    create_submission_rate_limiter,
)


def test_default_lead_repository_is_in_memory():
    """Test in-memory store by default."""
    with patch.object(settings, "lead_repository", "in_memory"):
        assert isinstance(create_lead_repository(), InMemoryLeadRepository)


def test_postgres_lead_repository_requires_database_url():
    """Test that postgres mode needs DATABASE_URL."""
    with patch.object(settings, "lead_repository", "postgres"), patch.object(
        settings, "database_url", ""
    ):
        with pytest.raises(ValueError):
            create_lead_repository()

    with patch.object(settings, "lead_repository", "postgres"), patch.object(
        settings, "database_url", "postgresql://leads@localhost/leads"
    ):
        assert isinstance(create_lead_repository(), PostgresLeadRepository)


def test_rate_limiter_selection():
    """Test NoOp unless rate limiting is enabled."""
    with patch.object(settings, "rate_limit_enabled", False):
        assert isinstance(create_submission_rate_limiter(), NoOpSubmissionRateLimiter)

    with patch.object(settings, "rate_limit_enabled", True):
        assert isinstance(create_submission_rate_limiter(), RedisSubmissionRateLimiter)


@pytest.mark.asyncio
async def test_intake_form_client_wiring():
    """Test that the form client posts through the HTTP gateway."""
    client = create_intake_form_client()

    assert isinstance(client, IntakeFormClient)
    assert isinstance(client._gateway, HttpLeadIntakeGateway)
    assert client.steps.index == 0
    assert client.session.started_at > 0


def test_app_lifespan_closes_resources():
    """Test that shutdown releases the rate limiter."""
    from app.main import app

    limiter = AsyncMock()
    with patch("app.adapters.inbound.http.routes._rate_limiter", limiter):
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

    limiter.close.assert_awaited_once()
