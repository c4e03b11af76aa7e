from collections.abc import Sequence
from pathlib import Path

from app.analysis.factory import AnalyzerFactory
from app.config.settings import Settings
from app.database.repositories.resume_analysis_repository import ResumeAnalysisRepository
from app.extraction.exceptions import ExtractionError
from app.extraction.factory import TextExtractorFactory
from app.logging.logger import Log
from app.processor.exceptions import ProcessorError
from app.processor.models import UploadedDocument, UploadOutcome
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    AnalyzeStep,
    ExtractTextStep,
    PersistAnalysisStep,
    ReleaseTempFileStep,
    ValidateUploadStep,
)
from app.processor.temp_storage import TempStorage


class UploadProcessor:
    """Runs the resume upload pipeline.

    Pipeline: validate -> extract -> release temp file -> analyze -> persist.
    The temporary upload never outlives process(): it is removed right after
    extraction, and again (idempotently) if any step raises.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        temp_storage: TempStorage,
        default_job_role: str,
    ) -> None:
        self._steps = list(steps)
        self._temp_storage = temp_storage
        self._default_job_role = default_job_role

    def process(
        self,
        document: UploadedDocument | None,
        job_role: str | None,
        owner_user_id: str,
    ) -> UploadOutcome:
        """Run every step for one upload and return the stored outcome."""
        context = PipelineContext(
            owner_user_id=owner_user_id,
            job_role=self.resolve_job_role(job_role),
            document=document,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except (ProcessorError, ExtractionError):
            # caller-facing rejections; logged by the API layer
            raise
        except Exception as exc:
            Log.error(f"Upload pipeline failed: {type(exc).__name__}: {exc}")
            raise
        finally:
            self._cleanup(context)

        if context.analysis is None or context.record is None:
            raise RuntimeError("Upload pipeline finished without an analysis record")
        return UploadOutcome(
            job_role=context.job_role,
            feedback_text=context.analysis.feedback_text,
            ats_score=context.analysis.ats_score,
            record_id=context.record.id,
        )

    def resolve_job_role(self, job_role: str | None) -> str:
        if job_role is None or not job_role.strip():
            return self._default_job_role
        return job_role.strip()

    def _cleanup(self, context: PipelineContext) -> None:
        if context.document is None:
            return
        try:
            self._temp_storage.remove(context.document.path)
        except OSError as exc:
            Log.warning(f"Could not remove temporary file {context.document.path}: {exc}")


def build_processor(
    settings: Settings,
    temp_storage: TempStorage | None = None,
) -> UploadProcessor:
    """Build an UploadProcessor with all required adapters."""
    storage = temp_storage if temp_storage is not None else TempStorage(Path(settings.upload_dir))
    steps: list[PipelineStep] = [
        ValidateUploadStep(),
        ExtractTextStep(TextExtractorFactory.create(settings)),
        ReleaseTempFileStep(storage),
        AnalyzeStep(AnalyzerFactory.create(settings)),
        PersistAnalysisStep(ResumeAnalysisRepository()),
    ]
    return UploadProcessor(
        steps=steps,
        temp_storage=storage,
        default_job_role=settings.default_job_role,
    )
