import io
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from app.database.models import ResumeAnalysisRecord
from app.reports.base import BaseReportRenderer
from app.reports.formatting import format_analysis_date, format_ats_score


class ReportlabRenderer(BaseReportRenderer):
    """Renders a feedback report with reportlab's platypus flowables.

    Long feedback flows onto as many letter-size pages as it needs.
    """

    TITLE = "Resume Feedback Report"

    def __init__(self) -> None:
        styles = getSampleStyleSheet()
        self._title_style = ParagraphStyle(
            "ReportTitle", parent=styles["Title"], fontSize=16, alignment=TA_CENTER
        )
        self._field_style = ParagraphStyle("ReportField", parent=styles["Normal"], fontSize=12)
        self._heading_style = ParagraphStyle(
            "ReportHeading", parent=styles["Heading2"], fontSize=13
        )
        self._body_style = ParagraphStyle(
            "ReportBody", parent=styles["Normal"], fontSize=11, leading=14
        )

    def render(self, record: ResumeAnalysisRecord) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=letter,
            title=self.TITLE,
            leftMargin=inch,
            rightMargin=inch,
            topMargin=inch,
            bottomMargin=inch,
        )
        doc.build(self._story(record))
        return buf.getvalue()

    def _story(self, record: ResumeAnalysisRecord) -> list:
        fields = [
            ("Original Filename", record.file_name or "N/A"),
            ("Job Role", record.job_role or "N/A"),
            ("Date Analyzed", format_analysis_date(record.created_at)),
            ("ATS Score", format_ats_score(record.ats_score)),
        ]
        story: list = [Paragraph(self.TITLE, self._title_style), Spacer(1, 12)]
        story.extend(
            Paragraph(f"{label}: {escape(value)}", self._field_style) for label, value in fields
        )
        story.append(Spacer(1, 12))
        story.append(Paragraph("<u>AI Feedback:</u>", self._heading_style))
        feedback = record.ai_feedback or "No AI feedback available."
        for block in feedback.split("\n\n"):
            if block.strip():
                story.append(
                    Paragraph(escape(block.strip()).replace("\n", "<br/>"), self._body_style)
                )
                story.append(Spacer(1, 6))
        return story
