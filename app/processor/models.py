from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedDocument:
    """A resume held in temporary storage for the duration of one request."""

    path: Path
    original_filename: str
    media_type: str
    size_bytes: int

    @property
    def extension(self) -> str:
        return Path(self.original_filename).suffix.lower()


@dataclass(frozen=True)
class UploadOutcome:
    """What the upload pipeline hands back to its caller."""

    job_role: str
    feedback_text: str
    ats_score: float | None
    record_id: int
