import pymupdf

from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.exceptions import DecodingError


class PyMuPdfAdapter(BaseDocumentDecoder):
    """Decodes PDF text using PyMuPDF."""

    def decode(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise DecodingError(f"pymupdf extraction failed: {exc}") from exc
