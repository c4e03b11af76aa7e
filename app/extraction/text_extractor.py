import re

from app.extraction.base import BaseDocumentExtractor
from app.extraction.exceptions import UnsupportedFileTypeError

SUPPORTED_EXTENSIONS = frozenset({"pdf", "doc", "docx"})

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and drop its leading dot: '.PDF' -> 'pdf'."""
    return extension.strip().lstrip(".").lower()


class TextExtractor:
    """Dispatches a document to the PDF or Word adapter by its extension."""

    def __init__(
        self,
        pdf_extractor: BaseDocumentExtractor,
        docx_extractor: BaseDocumentExtractor,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_extractor = docx_extractor

    def extract(self, document_bytes: bytes, extension: str) -> str:
        """Return normalized text for a supported document.

        Raises:
            UnsupportedFileTypeError: if the extension is not pdf, doc or docx.
            ExtractionFailedError: if the document cannot be decoded.
        """
        ext = normalize_extension(extension)
        if ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(ext)
        adapter = self._pdf_extractor if ext == "pdf" else self._docx_extractor
        return normalize_text(adapter.extract(document_bytes))
