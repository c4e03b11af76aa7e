import httpx
import openai

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AIServiceUnavailableError, AnalysisError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        max_retries: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=max_retries,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except openai.APIStatusError as exc:
            raise AIServiceUnavailableError(
                f"AI provider API error: {exc}",
                status_code=exc.status_code,
                body=exc.body,
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIServiceUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIServiceUnavailableError(
                f"AI provider API error: {exc}",
                body=exc.body,
            ) from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise AnalysisError("AI returned empty response")
        return content
