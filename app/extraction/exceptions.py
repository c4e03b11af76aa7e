class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when a document extension is outside the supported set."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type '{extension}'. Please upload PDF or DOCX.")


class ExtractionFailedError(ExtractionError):
    """Raised when a supported document cannot be decoded."""
