import threading
import time
from collections import deque

from fastapi import HTTPException, Request

from app.config import settings


class SlidingWindowLimiter:
    """At most `max_requests` hits per `window_seconds` for each key."""

    def __init__(self, max_requests: int, window_seconds: float, timer=time.monotonic):
        self.max_requests = max(1, int(max_requests))
        self.window_seconds = float(window_seconds)
        self.timer = timer
        self._hits: dict[str, deque] = {}
        self._next_sweep = None
        self._lock = threading.Lock()

    def _sweep(self, cutoff: float) -> None:
        # Forget clients whose newest hit has left the window
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]

    def hit(self, key: str) -> tuple[bool, float]:
        """Record a hit. Returns (allowed, seconds until the next hit would be allowed)."""
        now = self.timer()
        cutoff = now - self.window_seconds
        with self._lock:
            if self._next_sweep is None or now >= self._next_sweep:
                self._sweep(cutoff)
                self._next_sweep = now + self.window_seconds
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= self.max_requests:
                return False, hits[0] + self.window_seconds - now
            hits.append(now)
            return True, 0.0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)


def _describe(seconds: float) -> str:
    if seconds >= 3600 and seconds % 3600 == 0:
        hours = int(seconds // 3600)
        return f"{hours} hour" + ("s" if hours != 1 else "")
    minutes = int(seconds // 60)
    return f"{minutes} minutes"


class RateLimit:
    """Router dependency that answers 429 once a client is over its budget."""

    def __init__(self, max_requests: int, window_seconds: float, message: str | None = None):
        self.limiter = SlidingWindowLimiter(max_requests, window_seconds)
        self.retry_after = _describe(window_seconds)
        self.message = message or (
            f"Too many requests. Maximum {max_requests} requests per {self.retry_after} allowed."
        )

    def __call__(self, request: Request) -> None:
        if not settings.RATE_LIMIT_ENABLED or settings.ENVIRONMENT == "test":
            return
        if request.url.path == "/health":
            return
        client = request.client.host if request.client else "unknown"
        allowed, wait = self.limiter.hit(client)
        if not allowed:
            raise HTTPException(
                status_code=429,
                detail={"message": self.message, "retryAfter": self.retry_after},
                headers={"Retry-After": str(max(1, int(wait)))},
            )


api_limit = RateLimit(settings.RATE_LIMIT_MAX_REQUESTS, settings.RATE_LIMIT_WINDOW_MINUTES * 60)
auth_limit = RateLimit(
    settings.AUTH_RATE_LIMIT_MAX,
    15 * 60,
    message="Too many authentication attempts. Please try again in 15 minutes.",
)
report_limit = RateLimit(
    settings.REPORT_RATE_LIMIT_MAX,
    60 * 60,
    message=f"Too many report requests. Maximum {settings.REPORT_RATE_LIMIT_MAX} reports per hour allowed.",
)
