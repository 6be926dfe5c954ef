from unittest.mock import MagicMock

import pytest

from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.docx_adapter import DocxAdapter
from studynotes.extraction.exceptions import DecodingError
from studynotes.extraction.extractor import LEGACY_DOC_PLACEHOLDER, TextExtractor
from studynotes.extraction.models import ExtractionOutcome
from studynotes.extraction.pdfplumber_adapter import PdfPlumberAdapter
from studynotes.validation.validator import MIME_DOC, MIME_DOCX, MIME_PDF, MIME_PLAIN_TEXT


def _make_extractor() -> tuple[TextExtractor, MagicMock, MagicMock]:
    pdf_decoder = MagicMock(spec=BaseDocumentDecoder)
    docx_decoder = MagicMock(spec=BaseDocumentDecoder)
    extractor = TextExtractor(pdf_decoder=pdf_decoder, docx_decoder=docx_decoder)
    return extractor, pdf_decoder, docx_decoder


class TestPlainText:
    def test_decodes_utf8(self) -> None:
        extractor, pdf_decoder, docx_decoder = _make_extractor()

        result = extractor.extract("Énergie cinétique".encode(), MIME_PLAIN_TEXT, "physics.txt")

        assert result.text == "Énergie cinétique"
        assert result.outcome is ExtractionOutcome.SUCCESS
        pdf_decoder.decode.assert_not_called()
        docx_decoder.decode.assert_not_called()

    def test_invalid_utf8_does_not_raise(self) -> None:
        extractor, _pdf, _docx = _make_extractor()

        result = extractor.extract(b"caf\xff notes", MIME_PLAIN_TEXT, "bad.txt")

        assert result.outcome is ExtractionOutcome.SUCCESS
        assert "notes" in result.text


class TestPdf:
    def test_returns_decoded_text(self) -> None:
        extractor, pdf_decoder, _docx = _make_extractor()
        pdf_decoder.decode.return_value = "Cells are the unit of life"

        result = extractor.extract(b"%PDF-1.4", MIME_PDF, "bio.pdf")

        pdf_decoder.decode.assert_called_once_with(b"%PDF-1.4")
        assert result.text == "Cells are the unit of life"
        assert result.outcome is ExtractionOutcome.SUCCESS
        assert result.degraded is False

    def test_decoder_error_becomes_placeholder(self) -> None:
        extractor, pdf_decoder, _docx = _make_extractor()
        pdf_decoder.decode.side_effect = DecodingError("encrypted")

        result = extractor.extract(b"%PDF-1.4", MIME_PDF, "locked.pdf")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert result.degraded is True
        assert "could not extract text" in result.text
        assert "locked.pdf" in result.text
        assert "image-based" in result.text

    def test_unexpected_decoder_crash_becomes_placeholder(self) -> None:
        extractor, pdf_decoder, _docx = _make_extractor()
        pdf_decoder.decode.side_effect = RuntimeError("segfault-ish")

        result = extractor.extract(b"%PDF-1.4", MIME_PDF, "weird.pdf")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert "could not extract text" in result.text

    @pytest.mark.parametrize("decoded", ["", "   \n\t "])
    def test_blank_text_becomes_placeholder(self, decoded: str) -> None:
        extractor, pdf_decoder, _docx = _make_extractor()
        pdf_decoder.decode.return_value = decoded

        result = extractor.extract(b"%PDF-1.4", MIME_PDF, "scan.pdf")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert "scan.pdf" in result.text
        assert "image-based PDF" in result.text

    def test_real_pdf_with_pdfplumber(self, sample_pdf_bytes: bytes) -> None:
        extractor = TextExtractor(pdf_decoder=PdfPlumberAdapter(), docx_decoder=DocxAdapter())

        result = extractor.extract(sample_pdf_bytes, MIME_PDF, "real.pdf")

        assert result.outcome is ExtractionOutcome.SUCCESS
        assert "Photosynthesis" in result.text

    def test_corrupt_pdf_with_pdfplumber_degrades(self) -> None:
        extractor = TextExtractor(pdf_decoder=PdfPlumberAdapter(), docx_decoder=DocxAdapter())

        result = extractor.extract(b"garbage", MIME_PDF, "broken.pdf")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert result.text


class TestDocx:
    def test_returns_decoded_text(self) -> None:
        extractor, _pdf, docx_decoder = _make_extractor()
        docx_decoder.decode.return_value = "Lecture 3"

        result = extractor.extract(b"PK", MIME_DOCX, "lecture.docx")

        assert result.text == "Lecture 3"
        assert result.outcome is ExtractionOutcome.SUCCESS

    def test_decoder_error_becomes_placeholder(self) -> None:
        extractor, _pdf, docx_decoder = _make_extractor()
        docx_decoder.decode.side_effect = DecodingError("bad zip")

        result = extractor.extract(b"PK", MIME_DOCX, "lecture.docx")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert "could not extract text" in result.text
        assert "lecture.docx" in result.text

    def test_empty_document_becomes_placeholder(self) -> None:
        extractor, _pdf, docx_decoder = _make_extractor()
        docx_decoder.decode.return_value = ""

        result = extractor.extract(b"PK", MIME_DOCX, "blank.docx")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert "appears to be empty" in result.text

    def test_real_docx(self, sample_docx_bytes: bytes) -> None:
        extractor = TextExtractor(pdf_decoder=PdfPlumberAdapter(), docx_decoder=DocxAdapter())

        result = extractor.extract(sample_docx_bytes, MIME_DOCX, "cells.docx")

        assert "Mitochondria produce ATP" in result.text


class TestLegacyDoc:
    def test_always_returns_instructional_placeholder(self) -> None:
        extractor, pdf_decoder, docx_decoder = _make_extractor()

        result = extractor.extract(b"\xd0\xcf\x11\xe0", MIME_DOC, "essay.doc")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert result.text == LEGACY_DOC_PLACEHOLDER.format(name="essay.doc")
        assert "Save as .docx or PDF" in result.text
        pdf_decoder.decode.assert_not_called()
        docx_decoder.decode.assert_not_called()


class TestDispatch:
    def test_falls_back_to_suffix_when_mime_is_generic(self) -> None:
        extractor, pdf_decoder, _docx = _make_extractor()
        pdf_decoder.decode.return_value = "From suffix"

        result = extractor.extract(b"%PDF", "application/octet-stream", "Notes.PDF")

        pdf_decoder.decode.assert_called_once()
        assert result.text == "From suffix"

    def test_unknown_type_is_decoded_as_utf8(self) -> None:
        extractor, _pdf, _docx = _make_extractor()

        result = extractor.extract(b"# Heading", "text/markdown", "notes.md")

        assert result.text == "# Heading"
        assert result.outcome is ExtractionOutcome.UNSUPPORTED_TYPE

    def test_unknown_type_with_no_text_gets_placeholder(self) -> None:
        extractor, _pdf, _docx = _make_extractor()

        result = extractor.extract(b"", "image/png", "photo.png")

        assert result.outcome is ExtractionOutcome.FALLBACK_PLACEHOLDER
        assert "photo.png" in result.text

    @pytest.mark.parametrize("mime_type", [MIME_PDF, MIME_DOCX])
    def test_text_is_never_empty_on_failure(self, mime_type: str) -> None:
        extractor, pdf_decoder, docx_decoder = _make_extractor()
        pdf_decoder.decode.side_effect = DecodingError("x")
        docx_decoder.decode.side_effect = DecodingError("x")

        result = extractor.extract(b"", mime_type, "f")

        assert result.text.strip()
