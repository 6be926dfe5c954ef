from dataclasses import dataclass, field
from enum import Enum

from studynotes.database.models import NoteRecord


@dataclass(frozen=True)
class RawFile:
    """One uploaded file exactly as received."""

    name: str
    mime_type: str
    size: int
    content: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, name: str, mime_type: str, content: bytes) -> "RawFile":
        return cls(name=name, mime_type=mime_type, size=len(content), content=content)


@dataclass(frozen=True)
class UploadRequest:
    """One ingestion call: a requester, a title and an ordered batch of files."""

    requester_id: str
    title: str
    files: tuple[RawFile, ...]
    description: str | None = None


@dataclass(frozen=True)
class IngestedNote:
    """The note created by a successful ingestion run."""

    note: NoteRecord
    degraded_files: tuple[str, ...] = ()

    @property
    def summary_generated(self) -> bool:
        return bool(self.note.summary)


class ResponseCode(str, Enum):
    OK = "OK"
    RATE_LIMITED = "RATE_LIMITED"
    BAD_REQUEST = "BAD_REQUEST"
    CONTENT_REJECTED = "CONTENT_REJECTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class IngestionResponse:
    """Transport-neutral outcome of IngestionPipeline.handle()."""

    code: ResponseCode
    note: IngestedNote | None = None
    error: str | None = None
    categories: tuple[str, ...] = ()
