"""Format dispatch for uploaded study material.

Every path resolves to an ExtractionResult: decoder failures and empty
documents become bracketed placeholder notes that end up inline in the
note body, so one unreadable file never aborts a multi-file batch.
"""

from collections.abc import Callable
from pathlib import PurePosixPath
from typing import ClassVar

from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.exceptions import DecodingError
from studynotes.extraction.models import ExtractionOutcome, ExtractionResult
from studynotes.logging.logger import Log
from studynotes.validation.validator import MIME_DOC, MIME_DOCX, MIME_PDF, MIME_PLAIN_TEXT

PDF_EMPTY_PLACEHOLDER = (
    "[Note: {name} appears to be a PDF with no extractable text. It might be an "
    "image-based PDF. Please use a text-based PDF or convert the content to plain text.]"
)
PDF_FAILED_PLACEHOLDER = (
    "[Note: We could not extract text from {name}. The PDF might be image-based, "
    "encrypted or corrupted. Please try converting it to plain text.]"
)
DOCX_EMPTY_PLACEHOLDER = (
    "[Note: {name} appears to be empty or could not be read. "
    "Please check the file and try again.]"
)
DOCX_FAILED_PLACEHOLDER = (
    "[Note: We could not extract text from {name}. The file might be corrupted. "
    "Please try saving it as a PDF or plain text.]"
)
LEGACY_DOC_PLACEHOLDER = (
    "[Note: {name} is an old Word format (.doc). Please:\n"
    "1. Open it in Word\n"
    "2. Save as .docx or PDF\n"
    "3. Re-upload the new file]"
)
UNREADABLE_PLACEHOLDER = (
    "[Unable to extract text from {name}. Please use a plain text (.txt) or PDF file.]"
)

_Handler = Callable[[bytes, str], ExtractionResult]


class TextExtractor:
    """Turns raw file bytes into plain text according to the declared type."""

    SUFFIX_TO_MIME: ClassVar[dict[str, str]] = {
        ".txt": MIME_PLAIN_TEXT,
        ".pdf": MIME_PDF,
        ".docx": MIME_DOCX,
        ".doc": MIME_DOC,
    }

    def __init__(
        self,
        *,
        pdf_decoder: BaseDocumentDecoder,
        docx_decoder: BaseDocumentDecoder,
    ) -> None:
        self._pdf_decoder = pdf_decoder
        self._docx_decoder = docx_decoder
        self._handlers: dict[str, _Handler] = {
            MIME_PLAIN_TEXT: self._extract_plain_text,
            MIME_PDF: self._extract_pdf,
            MIME_DOCX: self._extract_docx,
            MIME_DOC: self._extract_legacy_doc,
        }

    def extract(self, data: bytes, mime_type: str, file_name: str) -> ExtractionResult:
        """Extract text from one file. Never raises."""
        handler = self._handlers.get(self._resolve_mime_type(mime_type, file_name))
        try:
            if handler is None:
                return self._extract_unknown(data, file_name)
            return handler(data, file_name)
        except Exception as exc:
            Log.warning(f"Unexpected extraction failure for {file_name}: {exc}")
            return self._placeholder(file_name, UNREADABLE_PLACEHOLDER)

    def _resolve_mime_type(self, mime_type: str, file_name: str) -> str:
        if mime_type in self._handlers:
            return mime_type
        suffix = PurePosixPath(file_name.lower()).suffix
        return self.SUFFIX_TO_MIME.get(suffix, mime_type)

    def _extract_plain_text(self, data: bytes, file_name: str) -> ExtractionResult:
        text = data.decode("utf-8", errors="replace")
        return ExtractionResult(file_name, text, ExtractionOutcome.SUCCESS)

    def _extract_pdf(self, data: bytes, file_name: str) -> ExtractionResult:
        return self._decode_with_fallback(
            self._pdf_decoder,
            data,
            file_name,
            empty_template=PDF_EMPTY_PLACEHOLDER,
            failed_template=PDF_FAILED_PLACEHOLDER,
        )

    def _extract_docx(self, data: bytes, file_name: str) -> ExtractionResult:
        return self._decode_with_fallback(
            self._docx_decoder,
            data,
            file_name,
            empty_template=DOCX_EMPTY_PLACEHOLDER,
            failed_template=DOCX_FAILED_PLACEHOLDER,
        )

    def _extract_legacy_doc(self, data: bytes, file_name: str) -> ExtractionResult:
        _ = data
        return self._placeholder(file_name, LEGACY_DOC_PLACEHOLDER)

    def _extract_unknown(self, data: bytes, file_name: str) -> ExtractionResult:
        text = data.decode("utf-8", errors="replace")
        if not text.strip():
            return self._placeholder(file_name, UNREADABLE_PLACEHOLDER)
        return ExtractionResult(file_name, text, ExtractionOutcome.UNSUPPORTED_TYPE)

    def _decode_with_fallback(
        self,
        decoder: BaseDocumentDecoder,
        data: bytes,
        file_name: str,
        *,
        empty_template: str,
        failed_template: str,
    ) -> ExtractionResult:
        try:
            text = decoder.decode(data)
        except DecodingError as exc:
            Log.warning(f"Decoder failed for {file_name}: {exc}")
            return self._placeholder(file_name, failed_template)
        except Exception as exc:
            Log.warning(f"Decoder crashed for {file_name}: {exc!r}")
            return self._placeholder(file_name, failed_template)

        if not text.strip():
            Log.warning(f"No extractable text in {file_name}")
            return self._placeholder(file_name, empty_template)
        return ExtractionResult(file_name, text, ExtractionOutcome.SUCCESS)

    @staticmethod
    def _placeholder(file_name: str, template: str) -> ExtractionResult:
        return ExtractionResult(
            file_name,
            template.format(name=file_name),
            ExtractionOutcome.FALLBACK_PLACEHOLDER,
        )
