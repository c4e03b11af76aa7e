from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.analysis.models import AnalysisResult
from app.database.models import ResumeAnalysisRecord
from app.processor.models import UploadedDocument


@dataclass(slots=True)
class PipelineContext:
    owner_user_id: str
    job_role: str
    document: UploadedDocument | None = None
    raw_bytes: bytes = b""
    resume_text: str = ""
    analysis: AnalysisResult | None = None
    record: ResumeAnalysisRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
