"""No-op submission rate limiter for when rate limiting is disabled."""

from typing import Optional

from app.application.ports.submission_rate_limiter import SubmissionRateLimiter


class NoOpSubmissionRateLimiter(SubmissionRateLimiter):
    """No-op adapter that never limits."""

    async def hit(self, key: str) -> Optional[int]:
        """
        Always allow.

        Args:
            key: Client identifier (ignored)

        Returns:
            Always None
        """
        return None
