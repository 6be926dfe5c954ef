from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from studynotes.database.models import NoteRecord
from studynotes.extraction.models import ExtractionResult
from studynotes.ingestion.models import UploadRequest
from studynotes.moderation.models import ModerationVerdict


@dataclass(slots=True)
class PipelineContext:
    request: UploadRequest
    extraction_results: list[ExtractionResult] = field(default_factory=list)
    sanitized_texts: list[str] = field(default_factory=list)
    markup_files: list[str] = field(default_factory=list)
    aggregated_content: str = ""
    verdict: ModerationVerdict | None = None
    summary: str | None = None
    note: NoteRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
