from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadResponse(_CamelModel):
    success: bool = True
    job_role: str
    analysis: str
    ats_score: float | None
    analysis_id: int


class HistoryItem(_CamelModel):
    id: int
    file_name: str
    job_role: str
    created_at: datetime | None
    ats_score: float | None
    ai_feedback: str


class HistoryResponse(_CamelModel):
    success: bool = True
    history: list[HistoryItem]


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
    message: str


class HealthResponse(_CamelModel):
    status: str
    message: str
