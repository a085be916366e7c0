"""Per-studio rate limiting."""
from __future__ import annotations

import time
from uuid import UUID

import redis.asyncio as redis
from fastapi import HTTPException, status

from studiodesk.core.config import settings

_redis_client: redis.Redis | None = None


async def _get_client() -> redis.Redis:
    """Return a cached Redis client instance."""

    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(str(settings.REDIS_URI), decode_responses=True)
    return _redis_client


async def check_rate_limit(studio_id: UUID | str) -> None:
    """Enforce a simple fixed-window rate limit per studio."""

    if not settings.RATE_LIMIT_ENABLED:
        return
    client = await _get_client()
    minute_window = int(time.time() // 60)
    key = f"rl:{studio_id}:{minute_window}"
    current = await client.incr(key)
    if current == 1:
        await client.expire(key, 60)
    if current > settings.RATE_LIMIT_RPM:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded",
        )
