import threading

from studynotes.logging.logger import Log
from studynotes.rate_limit.base import BaseRateLimitStore


class InMemoryRateLimitStore(BaseRateLimitStore):
    """Process-local store. Counters reset on restart and are not shared."""

    def __init__(self, cleanup_threshold: int = 1000) -> None:
        self._cleanup_threshold = cleanup_threshold
        self._history: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def hit(
        self,
        requester_id: str,
        now: float,
        window_seconds: float,
        max_requests: int,
    ) -> bool:
        with self._lock:
            recent = [t for t in self._history.get(requester_id, []) if now - t < window_seconds]
            if len(recent) >= max_requests:
                self._history[requester_id] = recent
                return False
            recent.append(now)
            self._history[requester_id] = recent

            if len(self._history) > self._cleanup_threshold:
                self._sweep(now, window_seconds * 2)
            return True

    def tracked_requesters(self) -> int:
        with self._lock:
            return len(self._history)

    def timestamps(self, requester_id: str) -> list[float]:
        with self._lock:
            return list(self._history.get(requester_id, []))

    def _sweep(self, now: float, max_age: float) -> None:
        # Caller holds the lock.
        try:
            for key in list(self._history):
                kept = [t for t in self._history[key] if now - t < max_age]
                if kept:
                    self._history[key] = kept
                else:
                    del self._history[key]
        except Exception as exc:
            Log.warning(f"Rate limit housekeeping skipped: {exc}")
