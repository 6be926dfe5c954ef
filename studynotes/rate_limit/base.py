from abc import ABC, abstractmethod


class BaseRateLimitStore(ABC):
    """Backing store for per-requester request timestamps."""

    @abstractmethod
    def hit(
        self,
        requester_id: str,
        now: float,
        window_seconds: float,
        max_requests: int,
    ) -> bool:
        """Atomically prune, check and record one attempt.

        Drops the requester's timestamps older than the window, then records
        ``now`` only if fewer than ``max_requests`` remain.

        Returns:
            True if the attempt was admitted and recorded.
        """
