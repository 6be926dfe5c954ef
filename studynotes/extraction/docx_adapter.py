import io

import docx

from studynotes.extraction.base import BaseDocumentDecoder
from studynotes.extraction.exceptions import DecodingError


class DocxAdapter(BaseDocumentDecoder):
    """Decodes DOCX body paragraphs and table cells using python-docx."""

    def decode(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            parts = [p.text for p in document.paragraphs if p.text]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text for cell in row.cells if cell.text]
                    if cells:
                        parts.append("\t".join(cells))
            return "\n".join(parts).strip()
        except Exception as exc:
            raise DecodingError(f"python-docx extraction failed: {exc}") from exc
