class InvalidUploadError(Exception):
    """Raised when an upload breaks the size or media type constraints."""
