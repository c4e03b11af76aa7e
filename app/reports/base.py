from abc import ABC, abstractmethod

from app.database.models import ResumeAnalysisRecord


class BaseReportRenderer(ABC):
    """Contract for feedback report renderers."""

    @abstractmethod
    def render(self, record: ResumeAnalysisRecord) -> bytes:
        """Render one analysis as a complete PDF document."""
