from dataclasses import dataclass
from datetime import datetime


@dataclass
class NoteRecord:
    """Represents a row from the notes table."""

    id: str
    user_id: str
    notebook_id: str
    title: str
    content: str
    description: str | None = None
    summary: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
