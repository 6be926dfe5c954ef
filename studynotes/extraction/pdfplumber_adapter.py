import io

import pdfplumber

from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.exceptions import DecodingError


class PdfPlumberAdapter(BaseDocumentDecoder):
    """Decodes PDF text using pdfplumber."""

    def decode(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise DecodingError(f"pdfplumber extraction failed: {exc}") from exc
