"""Rate limiting configuration using Upstash Redis.

Two sliding windows are enforced: a generous API-wide limit and a strict
per-client limit on the anonymous free-trial summarizer. Both fall back to
allowing requests if Upstash is not configured (development/test
environments) or if the limiter itself errors.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, HTTPException, Request, status

from core.config import Settings, get_settings


if TYPE_CHECKING:
    from upstash_ratelimit import Ratelimit

logger = logging.getLogger(__name__)

# Paths that bypass rate limiting (health checks, etc.)
RATE_LIMIT_BYPASS_PATHS: set[str] = {
    "/api/v1/health",
    "/api/v1/health/",
    "/health",
    "/health/",
}

FREE_TRIAL_LIMIT_MESSAGE = (
    "Too many free trial requests from this IP, please try again later "
    "or register for full access"
)


def _build_ratelimiter(
    settings: Settings, max_requests: int, window_seconds: int, prefix: str
) -> Ratelimit | None:
    # Import here to avoid import errors if upstash packages aren't used
    from upstash_ratelimit import Ratelimit, SlidingWindow
    from upstash_redis import Redis

    if not settings.UPSTASH_REDIS_REST_URL or not settings.UPSTASH_REDIS_REST_TOKEN:
        logger.warning(
            "Upstash Redis not configured. Rate limiting (%s) is disabled. "
            "Set UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN to enable.",
            prefix,
        )
        return None

    try:
        redis = Redis(
            url=settings.UPSTASH_REDIS_REST_URL,
            token=settings.UPSTASH_REDIS_REST_TOKEN,
        )
        ratelimit = Ratelimit(
            redis=redis,
            limiter=SlidingWindow(max_requests=max_requests, window=window_seconds),
            prefix=prefix,
        )
        logger.info(
            "Rate limiting (%s) enabled: %d requests per %d seconds",
            prefix,
            max_requests,
            window_seconds,
        )
        return ratelimit
    except Exception as e:
        logger.error("Failed to initialize rate limiter %s: %s", prefix, e)
        return None


@lru_cache
def get_ratelimiter() -> Ratelimit | None:
    """API-wide limiter, cached. None when Upstash is not configured."""
    settings = get_settings()
    return _build_ratelimiter(
        settings,
        settings.RATE_LIMIT_REQUESTS,
        settings.RATE_LIMIT_WINDOW_SECONDS,
        "nyayasetu:ratelimit",
    )


@lru_cache
def get_free_trial_ratelimiter() -> Ratelimit | None:
    """Free-trial limiter, cached. None when Upstash is not configured."""
    settings = get_settings()
    return _build_ratelimiter(
        settings,
        settings.FREE_TRIAL_RATE_LIMIT_REQUESTS,
        settings.FREE_TRIAL_RATE_LIMIT_WINDOW_SECONDS,
        "nyayasetu:free-trial",
    )


def _get_client_identifier(request: Request) -> str:
    """Extract client identifier from request for rate limiting.

    Uses X-Forwarded-For header if present (for reverse proxy setups),
    otherwise falls back to the direct client IP.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Take the first IP in the chain (original client)
        return forwarded_for.split(",")[0].strip()

    if request.client and request.client.host:
        return request.client.host

    # Unidentifiable clients get a per-request bucket so they never collide
    return f"unknown:{uuid.uuid4()}"


def _enforce(
    get_limiter: Callable[[], Ratelimit | None],
    request: Request,
    limit: int,
    detail: str,
) -> None:
    path = request.url.path
    if path in RATE_LIMIT_BYPASS_PATHS:
        return

    ratelimiter = get_limiter()
    if ratelimiter is None:
        return

    identifier = _get_client_identifier(request)

    try:
        response = ratelimiter.limit(identifier)

        if not response.allowed:
            current_time_ms = int(time.time() * 1000)
            reset_in_seconds = max(1, (response.reset - current_time_ms) // 1000)
            logger.warning(
                "Rate limit exceeded for %s on %s. Reset in %d seconds.",
                identifier,
                path,
                reset_in_seconds,
            )
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=detail,
                headers={
                    "Retry-After": str(reset_in_seconds),
                    "X-RateLimit-Limit": str(limit),
                    "X-RateLimit-Remaining": str(response.remaining),
                },
            )
    except HTTPException:
        raise
    except Exception as e:
        # Log but don't block requests if rate limiting fails
        logger.error("Rate limit check failed: %s", e)


async def check_rate_limit(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """FastAPI dependency enforcing the API-wide limit.

    Usage:
        api_router.include_router(router, dependencies=[Depends(check_rate_limit)])
    """
    _enforce(
        get_ratelimiter,
        request,
        settings.RATE_LIMIT_REQUESTS,
        "Too many requests. Please try again later.",
    )


async def check_free_trial_rate_limit(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """FastAPI dependency enforcing the free-trial limit (per client IP)."""
    _enforce(
        get_free_trial_ratelimiter,
        request,
        settings.FREE_TRIAL_RATE_LIMIT_REQUESTS,
        FREE_TRIAL_LIMIT_MESSAGE,
    )
