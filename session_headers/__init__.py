"""Клиентский менеджер сессии: флаг входа, Bearer токен в cookie и авторизация запросов."""

from session_headers.api_client import AuthAPIClient
from session_headers.app import SessionContext, create_session_context
from session_headers.config import Settings, get_settings
from session_headers.core import (
    AuthError,
    AuthNetworkError,
    AuthRejectedError,
    AuthResponseError,
    CookieTokenStore,
    RequestAuthenticator,
    SessionStore,
    build_authenticated_session,
    setup_logging,
)
from session_headers.schemas import (
    AuthResponse,
    HeaderOptions,
    UserLogin,
    UserProfile,
    UserRegister,
)

__all__ = [
    "AuthAPIClient",
    "AuthError",
    "AuthNetworkError",
    "AuthRejectedError",
    "AuthResponse",
    "AuthResponseError",
    "CookieTokenStore",
    "HeaderOptions",
    "RequestAuthenticator",
    "SessionContext",
    "SessionStore",
    "Settings",
    "UserLogin",
    "UserProfile",
    "UserRegister",
    "build_authenticated_session",
    "create_session_context",
    "get_settings",
    "setup_logging",
]
