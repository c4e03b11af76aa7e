import io

import pdfplumber

from app.extraction.base import BaseDocumentExtractor
from app.extraction.exceptions import ExtractionFailedError


class PdfPlumberAdapter(BaseDocumentExtractor):
    """Extracts the text layer of a PDF using pdfplumber."""

    def extract(self, document_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(document_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages)
