"""Submission rate limiter port."""

from abc import ABC, abstractmethod
from typing import Optional


class SubmissionRateLimiter(ABC):
    """Port interface for server-side submission rate limiting."""

    @abstractmethod
    async def hit(self, key: str) -> Optional[int]:
        """
        Register a submission attempt.

        Args:
            key: Client identifier (e.g., IP address)

        Returns:
            Seconds to wait before retrying if the limit is exceeded, None otherwise
        """
        pass

    async def close(self) -> None:
        """Release connections held by the limiter."""
        return None
