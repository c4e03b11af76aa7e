from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routes import health_router, resume_router
from app.auth.token_verifier import TokenVerifier
from app.config.settings import Settings
from app.database.repositories.resume_analysis_repository import ResumeAnalysisRepository
from app.processor.processor import UploadProcessor, build_processor
from app.processor.temp_storage import TempStorage
from app.reports.history_service import HistoryService
from app.reports.reportlab_renderer import ReportlabRenderer


def create_app(
    settings: Settings,
    *,
    processor: UploadProcessor | None = None,
    history_service: HistoryService | None = None,
    token_verifier: TokenVerifier | None = None,
    temp_storage: TempStorage | None = None,
) -> FastAPI:
    """Build the HTTP application. Collaborators default to the production wiring."""
    storage = temp_storage if temp_storage is not None else TempStorage(Path(settings.upload_dir))

    app = FastAPI(title="Resume Analyzer API", version="0.1.0")
    app.state.settings = settings
    app.state.temp_storage = storage
    app.state.processor = processor if processor is not None else build_processor(settings, storage)
    app.state.history_service = (
        history_service
        if history_service is not None
        else HistoryService(ResumeAnalysisRepository(), ReportlabRenderer())
    )
    app.state.token_verifier = (
        token_verifier if token_verifier is not None else TokenVerifier.from_settings(settings)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(resume_router)
    return app
