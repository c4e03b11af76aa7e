from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from app.api.dependencies import (
    get_current_user_id,
    get_history_service,
    get_processor,
    get_settings,
    get_temp_storage,
)
from app.api.schemas import HealthResponse, HistoryItem, HistoryResponse, UploadResponse
from app.api.upload_validation import check_file_type, read_limited
from app.config.settings import Settings
from app.processor.models import UploadedDocument
from app.processor.processor import UploadProcessor
from app.processor.temp_storage import TempStorage
from app.reports.history_service import HistoryService

resume_router = APIRouter(prefix="/api/resume", tags=["Resume"])
health_router = APIRouter(tags=["Health"])


@resume_router.post("/upload", response_model=UploadResponse)
def upload_resume(
    resume: UploadFile | None = File(None),
    job_role: str | None = Form(None, alias="jobRole"),
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
    processor: UploadProcessor = Depends(get_processor),
    temp_storage: TempStorage = Depends(get_temp_storage),
) -> UploadResponse:
    document = None
    if resume is not None and resume.filename:
        check_file_type(resume.filename, resume.content_type)
        data = read_limited(resume.file, settings.max_upload_bytes)
        document = UploadedDocument(
            path=temp_storage.save(data, resume.filename),
            original_filename=resume.filename,
            media_type=resume.content_type or "",
            size_bytes=len(data),
        )

    outcome = processor.process(document, job_role, user_id)
    return UploadResponse(
        job_role=outcome.job_role,
        analysis=outcome.feedback_text,
        ats_score=outcome.ats_score,
        analysis_id=outcome.record_id,
    )


@resume_router.get("/history", response_model=HistoryResponse)
def get_history(
    user_id: str = Depends(get_current_user_id),
    history_service: HistoryService = Depends(get_history_service),
) -> HistoryResponse:
    entries = history_service.list_history(user_id)
    return HistoryResponse(
        history=[
            HistoryItem(
                id=entry.id,
                file_name=entry.file_name,
                job_role=entry.job_role,
                created_at=entry.created_at,
                ats_score=entry.ats_score,
                ai_feedback=entry.ai_feedback,
            )
            for entry in entries
        ]
    )


@resume_router.get("/download/{analysis_id}")
def download_report(
    analysis_id: int,
    user_id: str = Depends(get_current_user_id),
    history_service: HistoryService = Depends(get_history_service),
) -> Response:
    report = history_service.build_report(analysis_id, user_id)
    return Response(
        content=report.content,
        media_type=report.media_type,
        headers={"Content-Disposition": f"attachment; filename={report.download_name}"},
    )


@health_router.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="UP", message="Resume Analyzer Backend is running!")
