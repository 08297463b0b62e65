"""Перехватчик исходящих запросов, добавляющий Bearer токен."""

import logging
from typing import Optional

import requests
from requests.auth import AuthBase

from session_headers.constants import BEARER_PREFIX, HEADER_AUTHORIZATION
from session_headers.core.session import SessionStore
from session_headers.core.storage import TokenSource

logger = logging.getLogger(__name__)


class RequestAuthenticator(AuthBase):
    """
    Auth hook для `requests`.

    Если пользователь вошел и в хранилище есть непустой токен, возвращает
    копию запроса с заголовком `Authorization: Bearer <token>`. Иначе запрос
    проходит без изменений. Токен читается из хранилища на каждый запрос,
    кэш заголовков SessionStore не используется.
    """

    def __init__(self, session: SessionStore, token_source: TokenSource) -> None:
        self.session = session
        self.token_source = token_source

    def authenticate(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        if not self.session.is_logged_in():
            return request

        token = self.token_source.get()
        if not token:
            logger.debug(f"No stored token, sending {request.method} {request.url} unauthenticated")
            return request

        authenticated = request.copy()
        authenticated.headers[HEADER_AUTHORIZATION] = f"{BEARER_PREFIX}{token}"
        return authenticated

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        return self.authenticate(request)


def build_authenticated_session(
    session: SessionStore,
    token_source: TokenSource,
    http: Optional[requests.Session] = None,
) -> requests.Session:
    """
    Встроить RequestAuthenticator в HTTP сессию.

    Args:
        session: Состояние сессии пользователя
        token_source: Источник актуального токена
        http: Существующая HTTP сессия (по умолчанию создается новая)

    Returns:
        HTTP сессия, все запросы которой проходят через перехватчик
    """
    http = http or requests.Session()
    http.auth = RequestAuthenticator(session, token_source)
    return http
