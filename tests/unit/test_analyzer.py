"""Tests for the ResumeAnalyzer (AI-powered resume review)."""

from unittest.mock import MagicMock

import httpx

from app.analysis.analyzer import ResumeAnalyzer
from app.analysis.exceptions import AIServiceUnavailableError, AnalysisError
from app.analysis.models import DEGRADED_FEEDBACK, AnalysisResult


def _make_analyzer(client: MagicMock | None = None) -> ResumeAnalyzer:
    if client is None:
        client = MagicMock()
    return ResumeAnalyzer(client=client, model="test-model")


class TestAnalyzeSuccess:
    def test_returns_feedback_and_parsed_score(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "Add metrics.\nATS Score: 9/10"
        result = _make_analyzer(client).analyze("resume text", "Backend Engineer")
        assert result == AnalysisResult(feedback_text="Add metrics.\nATS Score: 9/10", ats_score=9.0)
        assert not result.is_degraded

    def test_score_is_none_when_model_ignores_format(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "Solid resume, no score given."
        result = _make_analyzer(client).analyze("resume text", "Backend Engineer")
        assert result.feedback_text == "Solid resume, no score given."
        assert result.ats_score is None

    def test_prompt_embeds_role_and_resume_verbatim(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "ATS Score: 5/10"
        _make_analyzer(client).analyze("Knows {braces} and C++", "Data Engineer")
        prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert 'for the role of "Data Engineer"' in prompt
        assert "Knows {braces} and C++" in prompt
        assert "ATS Score: X/10" in prompt
        assert "missing keywords" in prompt

    def test_calls_client_with_model(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "ATS Score: 5/10"
        _make_analyzer(client).analyze("text", "role")
        assert client.create_chat_completion.call_args.kwargs["model"] == "test-model"

    def test_build_prompt_is_deterministic(self) -> None:
        analyzer = _make_analyzer()
        assert analyzer.build_prompt("text", "role") == analyzer.build_prompt("text", "role")


class TestAnalyzeDegrades:
    def test_network_failure_returns_degraded_result(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AIServiceUnavailableError(
            "AI provider network error", status_code=None
        )
        result = _make_analyzer(client).analyze("text", "role")
        assert result.ats_score is None
        assert result.feedback_text == DEGRADED_FEEDBACK
        assert result.is_degraded

    def test_status_failure_returns_degraded_result(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AIServiceUnavailableError(
            "AI provider API error", status_code=500, body={"error": "boom"}
        )
        result = _make_analyzer(client).analyze("text", "role")
        assert result == AnalysisResult.degraded()

    def test_malformed_response_returns_degraded_result(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AnalysisError("AI returned no choices")
        result = _make_analyzer(client).analyze("text", "role")
        assert result.ats_score is None
        assert result.feedback_text

    def test_unexpected_exception_never_escapes(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = httpx.ConnectError("refused")
        result = _make_analyzer(client).analyze("text", "role")
        assert result.ats_score is None
        assert result.feedback_text == DEGRADED_FEEDBACK
