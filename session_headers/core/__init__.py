"""Модуль core: состояние сессии, хранилище токена и перехватчик запросов."""

from session_headers.core.auth import RequestAuthenticator, build_authenticated_session
from session_headers.core.exceptions import (
    AppException,
    AuthError,
    AuthNetworkError,
    AuthRejectedError,
    AuthResponseError,
)
from session_headers.core.logging_config import setup_logging
from session_headers.core.session import SessionStore
from session_headers.core.storage import CookieTokenStore, TokenSource, TokenStore

__all__ = [
    # auth
    "RequestAuthenticator",
    "build_authenticated_session",
    # exceptions
    "AppException",
    "AuthError",
    "AuthNetworkError",
    "AuthRejectedError",
    "AuthResponseError",
    # logging
    "setup_logging",
    # session
    "SessionStore",
    # storage
    "CookieTokenStore",
    "TokenSource",
    "TokenStore",
]
