"""Offline analysis client adapter.

Returns canned feedback without network calls. Selected with
AI_PROVIDER=example for local development and tests.
"""

from typing import ClassVar

from app.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that returns a fixed, well-formed resume review."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "1. Suggestions for improvement: quantify achievements in each role.\n"
        "2. Missing keywords: testing, CI/CD.\n"
        "3. Formatting or grammar issues: none found.\n"
        "ATS Score: 7/10"
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, user_prompt
        return self.DEFAULT_RESPONSE
