import pymupdf

from app.extraction.base import BaseDocumentExtractor
from app.extraction.exceptions import ExtractionFailedError


class PyMuPdfAdapter(BaseDocumentExtractor):
    """Extracts the text layer of a PDF using PyMuPDF."""

    def extract(self, document_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=document_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise ExtractionFailedError("pymupdf extraction failed: document is encrypted")
                pages = [page.get_text() for page in doc]
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages)
