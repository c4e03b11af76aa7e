from abc import ABC, abstractmethod

from app.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for resume analyzers."""

    @abstractmethod
    def analyze(self, resume_text: str, job_role: str) -> AnalysisResult:
        """Review resume text against a target job role.

        Args:
            resume_text: Normalized text extracted from the uploaded resume.
            job_role: Role the candidate is applying for.

        Returns:
            AnalysisResult with feedback and the parsed ATS score. Provider
            failures resolve to AnalysisResult.degraded(); this method does
            not raise.
        """
