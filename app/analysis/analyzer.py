"""AI-powered resume reviewer."""

from pathlib import Path

from app.analysis.base import BaseAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AIServiceUnavailableError
from app.analysis.models import AnalysisResult
from app.analysis.prompt_loader import load_prompt_template
from app.analysis.score_parser import parse_ats_score
from app.logging.logger import Log


class ResumeAnalyzer(BaseAnalyzer):
    """Asks a chat-completion provider for resume feedback and an ATS score."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.7,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(2.0, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)

    def analyze(self, resume_text: str, job_role: str) -> AnalysisResult:
        prompt = self.build_prompt(resume_text, job_role)
        Log.info(f"Requesting AI analysis for job role '{job_role}'", model=self._model)

        try:
            content = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                user_prompt=prompt,
            )
        except AIServiceUnavailableError as exc:
            Log.error(
                f"AI provider call failed: {exc}",
                status_code=exc.status_code,
                body=exc.body,
            )
            return AnalysisResult.degraded()
        except Exception as exc:
            Log.exception(f"AI analysis failed: {exc}")
            return AnalysisResult.degraded()

        Log.debug(f"AI raw response:\n{content}")
        ats_score = parse_ats_score(content)
        if ats_score is None:
            Log.warning("AI response did not contain an ATS score line")
        else:
            Log.info(f"Parsed ATS score {ats_score}/10")
        return AnalysisResult(feedback_text=content, ats_score=ats_score)

    def build_prompt(self, resume_text: str, job_role: str) -> str:
        return self._prompt_template.format(job_role=job_role, resume_text=resume_text)
