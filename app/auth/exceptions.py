class UnauthorizedError(Exception):
    """Raised when a bearer credential is missing, invalid or expired."""
