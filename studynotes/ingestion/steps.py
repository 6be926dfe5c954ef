from studynotes.database.exceptions import PersistenceError
from studynotes.database.repositories.activity_repository import ActivityRepository
from studynotes.database.repositories.notes_repository import NotesRepository
from studynotes.extraction.extractor import TextExtractor
from studynotes.ingestion.exceptions import (
    ContentRejectedError,
    InvalidFileError,
    PersistenceFailedError,
    RateLimitedError,
)
from studynotes.ingestion.pipeline import PipelineContext, PipelineStep
from studynotes.logging.logger import Log
from studynotes.moderation.base import BaseModerator
from studynotes.moderation.models import MALICIOUS_CONTENT, ModerationVerdict
from studynotes.rate_limit.limiter import RateLimiter
from studynotes.sanitization.sanitizer import ContentSanitizer
from studynotes.summarization.summarizer import Summarizer
from studynotes.validation.validator import FileValidator

CONTENT_SEPARATOR = "\n\n"


class RateLimitStep(PipelineStep):
    def __init__(self, rate_limiter: RateLimiter) -> None:
        self._rate_limiter = rate_limiter

    def run(self, context: PipelineContext) -> PipelineContext:
        decision = self._rate_limiter.check_and_record(context.request.requester_id)
        if not decision.allowed:
            raise RateLimitedError(decision.error or "Rate limit exceeded")
        return context


class ValidateFilesStep(PipelineStep):
    def __init__(self, validator: FileValidator) -> None:
        self._validator = validator

    def run(self, context: PipelineContext) -> PipelineContext:
        request = context.request
        if not request.title.strip() or not request.files:
            raise InvalidFileError("Title and at least one file are required")

        for file in request.files:
            result = self._validator.validate(file)
            if not result.valid:
                raise InvalidFileError(f"{file.name}: {result.error}", file_name=file.name)
        Log.info(f"Validated {len(request.files)} file(s) for {request.requester_id}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extraction_results = [
            self._extractor.extract(file.content, file.mime_type, file.name)
            for file in context.request.files
        ]
        degraded = [r.file_name for r in context.extraction_results if r.degraded]
        Log.info(
            f"Extracted {sum(len(r.text) for r in context.extraction_results)} chars "
            f"from {len(context.extraction_results)} file(s), {len(degraded)} degraded"
        )
        return context


class SanitizeStep(PipelineStep):
    def __init__(self, sanitizer: ContentSanitizer) -> None:
        self._sanitizer = sanitizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.sanitized_texts = [
            self._sanitizer.sanitize(result.text) for result in context.extraction_results
        ]
        context.markup_files = [
            result.file_name
            for result in context.extraction_results
            if self._sanitizer.has_embedded_markup(result.text)
        ]
        context.aggregated_content = CONTENT_SEPARATOR.join(context.sanitized_texts)
        return context


class ModerateStep(PipelineStep):
    def __init__(self, moderator: BaseModerator) -> None:
        self._moderator = moderator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.markup_files:
            Log.warning(f"Embedded script markup in {', '.join(context.markup_files)}")
            verdict = ModerationVerdict.rejected(
                {MALICIOUS_CONTENT}, "Content contains potentially malicious patterns"
            )
        else:
            verdict = self._moderator.moderate(context.aggregated_content)
        context.verdict = verdict
        if not verdict.safe:
            raise ContentRejectedError(
                verdict.reason or "Content rejected by moderation",
                categories=tuple(sorted(verdict.categories)),
            )
        return context


class SummarizeStep(PipelineStep):
    """Best-effort: a failed or missing summarizer leaves the note without a summary."""

    def __init__(self, summarizer: Summarizer | None) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._summarizer is None:
            Log.debug("No summarizer configured, skipping summary")
            return context
        try:
            summary = self._summarizer.summarize(context.aggregated_content)
        except Exception as exc:
            Log.warning(f"Summary generation failed for '{context.request.title}': {exc}")
            return context
        context.summary = summary or None
        return context


class PersistNoteStep(PipelineStep):
    def __init__(self, notes_repo: NotesRepository) -> None:
        self._notes_repo = notes_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.verdict is None or not context.verdict.safe:
            raise ValueError("PipelineContext.verdict must be safe before persisting")
        request = context.request
        try:
            context.note = self._notes_repo.create_note(
                request.requester_id,
                request.title,
                context.aggregated_content,
                description=request.description or None,
                summary=context.summary,
            )
        except PersistenceError as exc:
            raise PersistenceFailedError("Failed to create note") from exc
        Log.info(f"Created note {context.note.id} for {request.requester_id}")
        return context


class LogActivityStep(PipelineStep):
    """Best-effort: records a note_upload activity event."""

    def __init__(self, activity_repo: ActivityRepository) -> None:
        self._activity_repo = activity_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.note is None:
            raise ValueError("PipelineContext.note must be set before logging activity")
        self._activity_repo.log_activity(
            context.request.requester_id,
            "note_upload",
            {
                "note_id": context.note.id,
                "title": context.request.title,
                "file_count": len(context.request.files),
                "summary_generated": bool(context.note.summary),
            },
        )
        return context
