import time

from studynotes.config.settings import Settings
from studynotes.rate_limit.base import BaseRateLimitStore
from studynotes.rate_limit.limiter import RateLimiter
from studynotes.rate_limit.memory_store import InMemoryRateLimitStore
from studynotes.rate_limit.postgres_store import PostgresRateLimitStore


class RateLimiterFactory:
    """Creates a RateLimiter on the configured backing store."""

    BACKENDS = ("memory", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> RateLimiter:
        backend = settings.rate_limit_backend.lower()
        store: BaseRateLimitStore
        if backend == "memory":
            store = InMemoryRateLimitStore(settings.rate_limit_cleanup_threshold)
            clock = time.monotonic
        elif backend == "postgres":
            # Timestamps are stored in the database, so they must be wall-clock.
            store = PostgresRateLimitStore()
            clock = time.time
        else:
            raise ValueError(
                f"Unknown rate limit backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return RateLimiter(
            store,
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
            clock=clock,
        )
