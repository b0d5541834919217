"""Per-client fixed-window request throttling."""
import logging
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from resumeroast.config import Settings, get_settings

logger = logging.getLogger(__name__)


def client_key(request: Request) -> str:
    """Caller address plus endpoint path."""
    return f"{get_remote_address(request)}:{request.url.path}"


def storage_uri(settings: Settings) -> str:
    """Redis when configured (optionally over TLS), otherwise in-process memory."""
    if not settings.redis_url:
        return "memory://"
    url = settings.redis_url
    if settings.redis_tls and url.startswith("redis://"):
        url = url.replace("redis://", "rediss://", 1)
    return url


def current_limit() -> str:
    """Quota string, read on every request so settings changes apply."""
    settings = get_settings()
    return f"{settings.rate_limit_requests}/{settings.rate_limit_period} seconds"


_settings = get_settings()

# Store failures are logged by slowapi and let the request through
limiter = Limiter(
    key_func=client_key,
    strategy="fixed-window",
    storage_uri=storage_uri(_settings),
    swallow_errors=True,
)


def rate_limit():
    if _settings.rate_limit_enabled:
        return limiter.limit(current_limit)

    def decorator(func):
        return func

    return decorator


def retry_after_seconds(request: Request) -> int:
    """Seconds until the window that rejected `request` resets."""
    view_limit = getattr(request.state, "view_rate_limit", None)
    if view_limit is None:
        return get_settings().rate_limit_period
    item, identifiers = view_limit
    reset_at, _ = request.app.state.limiter.limiter.get_window_stats(item, *identifiers)
    return max(1, math.ceil(reset_at - time.time()))


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    retry_after = retry_after_seconds(request)
    logger.info(f"Rate limit exceeded for {client_key(request)} ({exc.detail})")
    return JSONResponse(
        status_code=429,
        content={
            "error": "Too many requests. Please try again later.",
            "retryAfter": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )
