from dataclasses import dataclass
from datetime import datetime

from app.database.repositories.resume_analysis_repository import ResumeAnalysisRepository
from app.logging.logger import Log
from app.reports.base import BaseReportRenderer
from app.reports.formatting import report_download_name


@dataclass(frozen=True)
class HistoryEntry:
    """The slice of a stored analysis shown in a user's history."""

    id: int
    file_name: str
    job_role: str
    created_at: datetime | None
    ats_score: float | None
    ai_feedback: str


@dataclass(frozen=True)
class FeedbackReport:
    download_name: str
    content: bytes
    media_type: str = "application/pdf"


class HistoryService:
    """Read-only access to a user's past analyses."""

    def __init__(self, repository: ResumeAnalysisRepository, renderer: BaseReportRenderer) -> None:
        self._repository = repository
        self._renderer = renderer

    def list_history(self, user_id: str) -> list[HistoryEntry]:
        """Return the user's analyses, newest first."""
        records = self._repository.list_by_user(user_id)
        Log.info(f"Loaded {len(records)} history entries", user_id=user_id)
        return [
            HistoryEntry(
                id=record.id,
                file_name=record.file_name,
                job_role=record.job_role,
                created_at=record.created_at,
                ats_score=record.ats_score,
                ai_feedback=record.ai_feedback,
            )
            for record in records
        ]

    def build_report(self, analysis_id: int, user_id: str) -> FeedbackReport:
        """Render the PDF report for one of the user's analyses.

        Raises:
            AnalysisNotFoundError: if the analysis is missing or owned by someone else.
        """
        record = self._repository.find_for_user(analysis_id, user_id)
        content = self._renderer.render(record)
        Log.info(f"Rendered report for analysis {analysis_id}", size_bytes=len(content))
        return FeedbackReport(download_name=report_download_name(record.file_name), content=content)
