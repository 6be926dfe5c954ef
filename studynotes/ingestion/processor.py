from collections.abc import Sequence

from studynotes.config.settings import Settings
from studynotes.database.repositories.activity_repository import ActivityRepository
from studynotes.database.repositories.notes_repository import NotesRepository
from studynotes.extraction.factory import TextExtractorFactory
from studynotes.ingestion.exceptions import IngestionError
from studynotes.ingestion.models import (
    IngestedNote,
    IngestionResponse,
    ResponseCode,
    UploadRequest,
)
from studynotes.ingestion.pipeline import PipelineContext, PipelineStep
from studynotes.ingestion.steps import (
    ExtractTextStep,
    LogActivityStep,
    ModerateStep,
    PersistNoteStep,
    RateLimitStep,
    SanitizeStep,
    SummarizeStep,
    ValidateFilesStep,
)
from studynotes.logging.logger import Log
from studynotes.moderation.factory import ModeratorFactory
from studynotes.rate_limit.factory import RateLimiterFactory
from studynotes.rate_limit.limiter import RateLimiter
from studynotes.sanitization.sanitizer import ContentSanitizer
from studynotes.summarization.factory import SummarizerFactory
from studynotes.validation.validator import FileValidator


class IngestionPipeline:
    """Orchestrates note ingestion.

    Pipeline: rate limit -> validate -> extract -> sanitize -> moderate -> summarize
    -> persist, then best-effort follow-ups (activity log) that never fail the run.
    Summarization degrades to no summary instead of aborting.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        followup_steps: Sequence[PipelineStep] = (),
    ) -> None:
        self._steps = list(steps)
        self._followup_steps = list(followup_steps)

    def ingest(self, request: UploadRequest) -> IngestedNote:
        """Run every step in order; the first hard failure aborts the request.

        Raises:
            IngestionError: subclass describing the failed step.
        """
        Log.info(
            f"Ingesting '{request.title}' for {request.requester_id}: "
            f"{len(request.files)} file(s)"
        )
        context = PipelineContext(request=request)
        for step in self._steps:
            context = step.run(context)

        if context.note is None:
            raise IngestionError("Pipeline finished without creating a note")

        for step in self._followup_steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.warning(f"{type(step).__name__} failed for note {context.note.id}: {exc}")

        return IngestedNote(
            note=context.note,
            degraded_files=tuple(r.file_name for r in context.extraction_results if r.degraded),
        )

    def handle(self, request: UploadRequest) -> IngestionResponse:
        """Run ingest() and map its outcome onto a response code."""
        try:
            ingested = self.ingest(request)
        except IngestionError as exc:
            Log.error(f"Ingestion for {request.requester_id} aborted ({exc.code.value}): {exc}")
            return IngestionResponse(
                code=exc.code,
                error=str(exc),
                categories=getattr(exc, "categories", ()),
            )
        except Exception:
            Log.exception(f"Unexpected ingestion failure for {request.requester_id}")
            return IngestionResponse(
                code=ResponseCode.INTERNAL_ERROR,
                error="Failed to upload notes",
            )
        return IngestionResponse(code=ResponseCode.OK, note=ingested)


def build_ingestion_pipeline(
    settings: Settings,
    rate_limiter: RateLimiter | None = None,
) -> IngestionPipeline:
    """Build an IngestionPipeline with all configured adapters."""
    steps: list[PipelineStep] = [
        RateLimitStep(rate_limiter or RateLimiterFactory.create(settings)),
        ValidateFilesStep(FileValidator(max_file_size_bytes=settings.max_file_size_bytes)),
        ExtractTextStep(TextExtractorFactory.create(settings)),
        SanitizeStep(ContentSanitizer()),
        ModerateStep(ModeratorFactory.create(settings)),
        SummarizeStep(SummarizerFactory.create(settings)),
        PersistNoteStep(NotesRepository(default_notebook_title=settings.default_notebook_title)),
    ]
    followup_steps: list[PipelineStep] = [
        LogActivityStep(ActivityRepository()),
    ]
    return IngestionPipeline(steps=steps, followup_steps=followup_steps)
