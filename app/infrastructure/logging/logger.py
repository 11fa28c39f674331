"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("premium_artisan_leads")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    level: int = logging.INFO,
    request_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'intake', 'address')
        level: Log level (default: INFO)
        request_id: Optional request identifier for correlation
        **kwargs: Additional structured fields to log
    """
    fields: dict[str, Any] = {"component": component}
    if request_id is not None:
        fields["request_id"] = request_id
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_submission(
    request_id: str,
    outcome: str,
    status_code: int,
    **kwargs: Any,
) -> None:
    """
    Log the outcome of a lead submission.

    Args:
        request_id: Request identifier
        outcome: Short outcome code (e.g., 'stored', 'honeypot', 'missing_fields')
        status_code: HTTP status returned to the client
        **kwargs: Additional fields
    """
    level = logging.ERROR if status_code >= 500 else logging.INFO
    log_event(
        component="intake",
        level=level,
        request_id=request_id,
        outcome=outcome,
        status_code=status_code,
        **kwargs,
    )


def log_guard_rejection(reason: str, **kwargs: Any) -> None:
    """
    Log a client-side anti-abuse rejection.

    Args:
        reason: Verdict name (e.g., 'too_fast', 'throttled')
        **kwargs: Additional fields
    """
    log_event(component="anti_abuse", level=logging.INFO, reason=reason, **kwargs)


def log_address_lookup(
    operation: str,
    results_count: int,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log an address lookup call.

    Args:
        operation: 'search' or 'reverse'
        results_count: Number of candidates returned
        level: Log level (WARNING for degraded lookups)
        **kwargs: Additional fields
    """
    log_event(
        component="address",
        level=level,
        operation=operation,
        results_count=results_count,
        **kwargs,
    )


# Export logger instance for direct use
logger = _logger
