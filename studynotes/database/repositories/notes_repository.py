from typing import Any

import psycopg
from psycopg.rows import dict_row

from studynotes.database.connection import get_connection
from studynotes.database.exceptions import PersistenceError
from studynotes.database.models import NoteRecord


class NotesRepository:
    """Database operations for the notebooks and notes tables."""

    def __init__(self, default_notebook_title: str = "My Notes") -> None:
        self._default_notebook_title = default_notebook_title

    def create_note(
        self,
        requester_id: str,
        title: str,
        content: str,
        description: str | None = None,
        summary: str | None = None,
    ) -> NoteRecord:
        """Insert a note into the requester's default notebook.

        The notebook lookup/creation and the note insert share one
        transaction, so a failure leaves neither behind.

        Raises:
            PersistenceError: if any statement fails.
        """
        try:
            with get_connection() as conn:
                notebook_id = self._get_or_create_notebook(conn, requester_id)
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        INSERT INTO notes
                            (user_id, notebook_id, title, description, content, summary)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING id, user_id, notebook_id, title, description,
                                  content, summary, created_at, updated_at
                        """,
                        (requester_id, notebook_id, title, description, content, summary),
                    )
                    row = cur.fetchone()
                if row is None:
                    raise PersistenceError("Note insert returned no row")
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to create note: {exc}") from exc

        return self._row_to_note(row)

    def _get_or_create_notebook(self, conn: psycopg.Connection[Any], requester_id: str) -> str:
        with conn.cursor() as cur:
            cur.execute(
                """
                SELECT id FROM notebooks
                WHERE user_id = %s AND title = %s
                ORDER BY created_at
                LIMIT 1
                """,
                (requester_id, self._default_notebook_title),
            )
            row = cur.fetchone()
            if row is not None:
                return str(row[0])

            cur.execute(
                "INSERT INTO notebooks (user_id, title) VALUES (%s, %s) RETURNING id",
                (requester_id, self._default_notebook_title),
            )
            created = cur.fetchone()
        if created is None:
            raise PersistenceError("Notebook insert returned no row")
        return str(created[0])

    @staticmethod
    def _row_to_note(row: dict[str, Any]) -> NoteRecord:
        return NoteRecord(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            notebook_id=str(row["notebook_id"]),
            title=row["title"],
            description=row["description"],
            content=row["content"],
            summary=row["summary"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
