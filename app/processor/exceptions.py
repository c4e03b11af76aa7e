class ProcessorError(Exception):
    """Base exception for upload pipeline errors raised by the processor itself."""


class NoFileProvidedError(ProcessorError):
    """Raised when an upload request carries no file."""

    def __init__(self) -> None:
        super().__init__("No file uploaded")
