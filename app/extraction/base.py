from abc import ABC, abstractmethod


class BaseDocumentExtractor(ABC):
    """Contract for all document text extraction adapters."""

    @abstractmethod
    def extract(self, document_bytes: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            document_bytes: Raw file content.

        Returns:
            Extracted text, not yet whitespace-normalized.

        Raises:
            ExtractionFailedError: if decoding fails for any reason.
        """
