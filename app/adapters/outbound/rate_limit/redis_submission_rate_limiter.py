"""Redis fixed-window submission rate limiter adapter."""

from typing import Optional

from redis import asyncio as aioredis

from app.application.ports.submission_rate_limiter import SubmissionRateLimiter


class RedisSubmissionRateLimiter(SubmissionRateLimiter):
    """Counts submissions per client key in a fixed Redis window."""

    KEY_PREFIX = "intake:submissions:"

    def __init__(self, redis_url: str, max_submissions: int, window_seconds: int) -> None:
        """
        Initialize Redis rate limiter.

        Args:
            redis_url: Redis connection URL
            max_submissions: Submissions allowed per window
            window_seconds: Window length in seconds
        """
        self._redis_url = redis_url
        self._max_submissions = max_submissions
        self._window_seconds = window_seconds
        self._client: Optional[aioredis.Redis] = None

    async def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = await aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, key: str) -> str:
        """
        Make Redis key for a client.

        Args:
            key: Client identifier

        Returns:
            Redis key string
        """
        return f"{self.KEY_PREFIX}{key}"

    async def hit(self, key: str) -> Optional[int]:
        """
        Register a submission attempt.

        Args:
            key: Client identifier (e.g., IP address)

        Returns:
            Seconds until the window resets if the limit is exceeded, None otherwise
        """
        client = await self._get_client()
        redis_key = self._make_key(key)
        count = await client.incr(redis_key)
        if count == 1:
            await client.expire(redis_key, self._window_seconds)
        if count <= self._max_submissions:
            return None
        ttl = await client.ttl(redis_key)
        if ttl is None or ttl < 0:
            # Key lost its expiry; restart the window
            await client.expire(redis_key, self._window_seconds)
            ttl = self._window_seconds
        return max(int(ttl), 1)

    async def close(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.close()
            self._client = None
