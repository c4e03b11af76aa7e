class RepositoryError(Exception):
    """Base exception for persistent store errors."""


class PersistenceFailedError(RepositoryError):
    """Raised when a record fails validation or cannot be written."""


class AnalysisNotFoundError(RepositoryError):
    """Raised when an analysis does not exist or belongs to another user."""
