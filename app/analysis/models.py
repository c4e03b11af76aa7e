from dataclasses import dataclass

DEGRADED_FEEDBACK = (
    "Error: Could not retrieve AI analysis due to an API failure. "
    "Please check backend logs."
)


@dataclass(frozen=True)
class AnalysisResult:
    """Feedback text from the AI provider plus the ATS score parsed from it."""

    feedback_text: str
    ats_score: float | None = None

    @property
    def is_degraded(self) -> bool:
        return self.feedback_text == DEGRADED_FEEDBACK

    @classmethod
    def degraded(cls) -> "AnalysisResult":
        """Placeholder result used when the AI provider is unavailable."""
        return cls(feedback_text=DEGRADED_FEEDBACK, ats_score=None)
