from typing import ClassVar

from app.analysis.analyzer import ResumeAnalyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured resume analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "openai": None,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ResumeAnalyzer(client=ExampleClientAdapter(), model="example")
        client = OpenAIClientAdapter(
            api_key=settings.ai_api_key,
            timeout_seconds=settings.ai_timeout_seconds,
            max_retries=settings.ai_max_retries,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return ResumeAnalyzer(
            client=client,
            model=settings.ai_model_name,
            temperature=settings.ai_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.ai_base_url.strip()
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return override
        if provider not in cls.OPENAI_COMPATIBLE_BASE_URLS:
            supported = ["example", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
            raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")
        return override or cls.OPENAI_COMPATIBLE_BASE_URLS[provider]
