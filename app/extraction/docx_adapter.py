import io

import docx

from app.extraction.base import BaseDocumentExtractor
from app.extraction.exceptions import ExtractionFailedError


class DocxAdapter(BaseDocumentExtractor):
    """Extracts the raw text of a Word document using python-docx.

    Paragraph text comes first, then table cells row by row. Styling,
    headers and footers are discarded.
    """

    def extract(self, document_bytes: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(document_bytes))
            parts = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    parts.extend(cell.text for cell in row.cells)
        except Exception as exc:
            raise ExtractionFailedError(f"docx extraction failed: {exc}") from exc
        return "\n".join(parts)
