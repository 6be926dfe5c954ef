"""Metadata checks applied to every uploaded file before extraction."""

from typing import ClassVar

from studynotes.ingestion.models import RawFile
from studynotes.validation.models import ValidationFailure, ValidationResult

MIME_PLAIN_TEXT = "text/plain"
MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_DOC = "application/msword"


class FileValidator:
    """Checks size, declared MIME type and filename. Never reads content."""

    ALLOWED_MIME_TYPES: ClassVar[frozenset[str]] = frozenset(
        {MIME_PLAIN_TEXT, MIME_PDF, MIME_DOCX, MIME_DOC}
    )
    SUSPICIOUS_EXTENSIONS: ClassVar[tuple[str, ...]] = (
        ".exe",
        ".bat",
        ".cmd",
        ".sh",
        ".dll",
        ".scr",
        ".js",
        ".vbs",
    )

    def __init__(self, max_file_size_bytes: int = 10 * 1024 * 1024) -> None:
        self._max_file_size_bytes = max_file_size_bytes

    def validate(self, file: RawFile) -> ValidationResult:
        """Run the checks in order and stop at the first failure."""
        if file.size > self._max_file_size_bytes:
            limit_mb = self._max_file_size_bytes / 1024 / 1024
            return ValidationResult.rejected(
                ValidationFailure.SIZE_EXCEEDED,
                f"File size must be less than {limit_mb:g}MB",
            )

        if file.mime_type not in self.ALLOWED_MIME_TYPES:
            return ValidationResult.rejected(
                ValidationFailure.UNSUPPORTED_TYPE,
                "File type not supported. Please upload PDF, DOCX, DOC, or TXT files.",
            )

        name = file.name.lower()
        if name.count(".") > 1 or name.endswith(self.SUSPICIOUS_EXTENSIONS):
            return ValidationResult.rejected(
                ValidationFailure.SUSPICIOUS_FILE,
                "Suspicious file detected. Please ensure you are uploading a valid document.",
            )

        return ValidationResult.ok()
