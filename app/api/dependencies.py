from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.token_verifier import TokenVerifier
from app.config.settings import Settings
from app.processor.processor import UploadProcessor
from app.processor.temp_storage import TempStorage
from app.reports.history_service import HistoryService

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> UploadProcessor:
    return request.app.state.processor


def get_temp_storage(request: Request) -> TempStorage:
    return request.app.state.temp_storage


def get_history_service(request: Request) -> HistoryService:
    return request.app.state.history_service


def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Resolve the caller's user id from the Authorization bearer token."""
    verifier: TokenVerifier = request.app.state.token_verifier
    token = credentials.credentials if credentials is not None else None
    return verifier.verify(token)
