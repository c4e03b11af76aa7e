from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific chat-completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        """Return the first completion's message content as plain text.

        Raises:
            AIServiceUnavailableError: on transport or API status errors.
            AnalysisError: when the response carries no usable content.
        """
