from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.exceptions import InvalidUploadError
from app.api.schemas import ErrorResponse
from app.auth.exceptions import UnauthorizedError
from app.database.exceptions import AnalysisNotFoundError, PersistenceFailedError
from app.extraction.exceptions import ExtractionFailedError, UnsupportedFileTypeError
from app.logging.logger import Log
from app.processor.exceptions import NoFileProvidedError


# exception type -> (status, error code, caller-facing message or None for str(exc))
ERROR_TABLE: dict[type[Exception], tuple[int, str, str | None]] = {
    NoFileProvidedError: (status.HTTP_400_BAD_REQUEST, "NO_FILE_PROVIDED", "No file uploaded"),
    InvalidUploadError: (status.HTTP_400_BAD_REQUEST, "INVALID_UPLOAD", None),
    UnsupportedFileTypeError: (
        status.HTTP_400_BAD_REQUEST,
        "UNSUPPORTED_FILE_TYPE",
        "Unsupported file type. Please upload PDF or DOCX.",
    ),
    ExtractionFailedError: (
        status.HTTP_400_BAD_REQUEST,
        "EXTRACTION_FAILED",
        "Could not read text from the uploaded document.",
    ),
    PersistenceFailedError: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "PERSISTENCE_FAILED",
        "Failed to process resume. Please check server logs.",
    ),
    AnalysisNotFoundError: (status.HTTP_404_NOT_FOUND, "ANALYSIS_NOT_FOUND", "Resume not found"),
    UnauthorizedError: (status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", None),
}


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=code, message=message)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def _handle_known_error(request: Request, exc: Exception) -> JSONResponse:
    for exc_type, (status_code, code, message) in ERROR_TABLE.items():
        if isinstance(exc, exc_type):
            Log.warning(
                f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}",
                status_code=status_code,
            )
            return error_response(status_code, code, message or str(exc))
    return await _handle_unexpected_error(request, exc)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(
        f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred.",
    )


def register_error_handlers(app: FastAPI) -> None:
    for exc_type in ERROR_TABLE:
        app.add_exception_handler(exc_type, _handle_known_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
