import time
from collections.abc import Callable

from studynotes.rate_limit.base import BaseRateLimitStore
from studynotes.rate_limit.models import RateLimitDecision


class RateLimiter:
    """Bounds how many uploads one requester may start per rolling window."""

    def __init__(
        self,
        store: BaseRateLimitStore,
        *,
        max_requests: int = 20,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store = store
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock

    def check_and_record(self, requester_id: str) -> RateLimitDecision:
        """Admit and record the attempt, or refuse it without recording."""
        if self._store.hit(requester_id, self._clock(), self._window_seconds, self._max_requests):
            return RateLimitDecision(allowed=True)
        return RateLimitDecision(
            allowed=False,
            error=(
                f"Rate limit exceeded. Maximum {self._max_requests} uploads "
                f"per {self._window_seconds:g} seconds."
            ),
        )
