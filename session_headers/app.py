"""Сборка компонентов сессии для хост-приложения."""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from session_headers.api_client import AuthAPIClient
from session_headers.config import Settings, get_settings
from session_headers.core.auth import RequestAuthenticator, build_authenticated_session
from session_headers.core.session import SessionStore
from session_headers.core.storage import CookieTokenStore

logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """Все объекты одной пользовательской сессии; владелец - хост-приложение."""

    settings: Settings
    token_store: CookieTokenStore
    api: AuthAPIClient
    session: SessionStore
    authenticator: RequestAuthenticator
    http: requests.Session

    def save_token(self, token: str) -> None:
        """Сохранить токен после успешного login/register"""
        self.token_store.set(
            self.settings.token_cookie_name,
            token,
            self.settings.token_cookie_path,
        )

    def close(self) -> None:
        self.http.close()


def create_session_context(
    settings: Optional[Settings] = None,
    http: Optional[requests.Session] = None,
    token_store: Optional[CookieTokenStore] = None,
) -> SessionContext:
    """
    Создать контекст сессии.

    Одна HTTP сессия используется и для эндпоинтов аутентификации, и для
    остальных запросов приложения; перехватчик встроен в нее.

    Args:
        settings: Настройки (по умолчанию `get_settings()`)
        http: HTTP сессия (по умолчанию создается новая)
        token_store: Хранилище токена (по умолчанию cookie jar из настроек)
    """
    settings = settings or get_settings()
    http = http or requests.Session()
    token_store = token_store or CookieTokenStore(
        filename=settings.token_cookie_file,
        domain=settings.token_cookie_domain,
        default_key=settings.token_cookie_name,
        default_path=settings.token_cookie_path,
    )

    api = AuthAPIClient(settings.api_url, timeout=settings.api_timeout, http=http)
    session = SessionStore(
        api,
        token_store,
        token_key=settings.token_cookie_name,
        token_path=settings.token_cookie_path,
        logged_in=settings.initial_logged_in,
    )
    http = build_authenticated_session(session, token_store, http=http)

    logger.info(
        "Session context created",
        extra={
            "api_url": settings.api_url,
            "cookie_file": settings.token_cookie_file,
            "logged_in": settings.initial_logged_in,
        },
    )
    return SessionContext(
        settings=settings,
        token_store=token_store,
        api=api,
        session=session,
        authenticator=http.auth,
        http=http,
    )
