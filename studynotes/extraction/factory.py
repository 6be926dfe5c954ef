from studynotes.config.settings import Settings
from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.docx_adapter import DocxAdapter
from studynotes.extraction.extractor import TextExtractor
from studynotes.extraction.pdfplumber_adapter import PdfPlumberAdapter
from studynotes.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates a TextExtractor with the PDF engine chosen in settings."""

    PDF_ADAPTERS: dict[str, type[BaseDocumentDecoder]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return TextExtractor(pdf_decoder=adapter_cls(), docx_decoder=DocxAdapter())
