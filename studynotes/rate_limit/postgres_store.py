import psycopg

from studynotes.database.connection import get_connection
from studynotes.logging.logger import Log
from studynotes.rate_limit.base import BaseRateLimitStore


class PostgresRateLimitStore(BaseRateLimitStore):
    """Shared store on the upload_rate_events table, for multi-instance deployments.

    A transaction-scoped advisory lock keyed on the requester serializes the
    prune/count/insert sequence across every process using the database.
    Rows of idle requesters are swept afterwards in a separate transaction.
    """

    def hit(
        self,
        requester_id: str,
        now: float,
        window_seconds: float,
        max_requests: int,
    ) -> bool:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT pg_advisory_xact_lock(hashtext(%s))", (requester_id,))
                cur.execute(
                    """
                    DELETE FROM upload_rate_events
                    WHERE requester_id = %s AND created_at <= to_timestamp(%s)
                    """,
                    (requester_id, now - window_seconds),
                )
                cur.execute(
                    "SELECT COUNT(*) FROM upload_rate_events WHERE requester_id = %s",
                    (requester_id,),
                )
                row = cur.fetchone()
                count = row[0] if row is not None else 0
                allowed = count < max_requests
                if allowed:
                    cur.execute(
                        """
                        INSERT INTO upload_rate_events (requester_id, created_at)
                        VALUES (%s, to_timestamp(%s))
                        """,
                        (requester_id, now),
                    )
            conn.commit()

        self._sweep(now - window_seconds * 2)
        return allowed

    def _sweep(self, cutoff: float) -> None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "DELETE FROM upload_rate_events WHERE created_at <= to_timestamp(%s)",
                        (cutoff,),
                    )
                conn.commit()
        except psycopg.Error as exc:
            Log.warning(f"Rate limit housekeeping skipped: {exc}")
