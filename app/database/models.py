from dataclasses import dataclass
from datetime import datetime


@dataclass
class ResumeAnalysisRecord:
    """Represents a row from the resume_analyses table."""

    id: int
    file_name: str
    job_role: str
    resume_text: str
    ai_feedback: str
    user_id: str
    ats_score: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NewResumeAnalysis:
    """Values for a resume_analyses row that has not been inserted yet."""

    file_name: str
    job_role: str
    resume_text: str
    ai_feedback: str
    user_id: str
    ats_score: float | None = None
