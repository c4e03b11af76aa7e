from app.analysis.base import BaseAnalyzer
from app.database.exceptions import PersistenceFailedError, RepositoryError
from app.database.models import NewResumeAnalysis
from app.database.repositories.resume_analysis_repository import ResumeAnalysisRepository
from app.extraction.exceptions import ExtractionError, ExtractionFailedError
from app.extraction.text_extractor import TextExtractor
from app.logging.logger import Log
from app.processor.exceptions import NoFileProvidedError
from app.processor.models import UploadedDocument
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.temp_storage import TempStorage


def _require_document(context: PipelineContext) -> UploadedDocument:
    if context.document is None:
        raise ValueError("PipelineContext.document must be set")
    return context.document


class ValidateUploadStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            Log.warning("Upload rejected: no file provided")
            raise NoFileProvidedError()
        Log.info(
            f"Received '{context.document.original_filename}' for job role '{context.job_role}'",
            size_bytes=context.document.size_bytes,
        )
        return context


class ExtractTextStep(PipelineStep):
    """Reads the temp file and extracts normalized text.

    On failure the temp file is left for UploadProcessor to remove.
    """

    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        document = _require_document(context)
        try:
            try:
                context.raw_bytes = document.path.read_bytes()
            except OSError as exc:
                raise ExtractionFailedError(f"Failed to read upload: {exc}") from exc
            context.resume_text = self._text_extractor.extract(
                context.raw_bytes, document.extension
            )
        except ExtractionError as exc:
            Log.warning(f"Extraction failed for '{document.original_filename}': {exc}")
            raise
        Log.info(f"Extracted {len(context.resume_text)} chars from '{document.original_filename}'")
        if not context.resume_text:
            Log.warning(f"Extracted resume text is empty for '{document.original_filename}'")
        return context


class ReleaseTempFileStep(PipelineStep):
    def __init__(self, temp_storage: TempStorage) -> None:
        self._temp_storage = temp_storage

    def run(self, context: PipelineContext) -> PipelineContext:
        document = _require_document(context)
        self._temp_storage.remove(document.path)
        context.raw_bytes = b""
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._analyzer.analyze(context.resume_text, context.job_role)
        Log.info(
            "AI analysis finished",
            ats_score=context.analysis.ats_score,
            degraded=context.analysis.is_degraded,
        )
        return context


class PersistAnalysisStep(PipelineStep):
    def __init__(self, repository: ResumeAnalysisRepository) -> None:
        self._repository = repository

    def run(self, context: PipelineContext) -> PipelineContext:
        document = _require_document(context)
        if context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before persist")
        new_analysis = NewResumeAnalysis(
            file_name=document.original_filename,
            job_role=context.job_role,
            resume_text=context.resume_text,
            ai_feedback=context.analysis.feedback_text,
            ats_score=context.analysis.ats_score,
            user_id=context.owner_user_id,
        )
        try:
            context.record = self._repository.create(new_analysis)
        except RepositoryError:
            raise
        except Exception as exc:
            raise PersistenceFailedError(f"Failed to save analysis: {exc}") from exc
        Log.info(f"Analysis saved with id {context.record.id}", ats_score=context.record.ats_score)
        return context
