import re
from datetime import datetime

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


def format_ats_score(score: float | None) -> str:
    """'7/10', '8.5/10', or 'Not Available' when the score is missing."""
    if score is None:
        return "Not Available"
    return f"{score:g}/10"


def format_analysis_date(created_at: datetime | None) -> str:
    if created_at is None:
        return "N/A"
    return created_at.strftime("%Y-%m-%d")


def report_download_name(file_name: str | None) -> str:
    """Header-safe attachment name: 'My CV.pdf' -> 'My_CV.pdf-feedback.pdf'."""
    safe = _UNSAFE_FILENAME_CHARS.sub("_", file_name) if file_name else "resume"
    return f"{safe}-feedback.pdf"
