class AnalysisError(Exception):
    """Raised when the AI provider returns an unusable response."""


class AIServiceUnavailableError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues.

    Carries the provider status code and response body when one was received.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: object | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
