"""Общие фикстуры: HTTP сессия с подменным транспортом и контекст сессии."""

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

from session_headers.app import SessionContext, create_session_context
from session_headers.config import Settings

API_URL = "http://api.test"
COOKIE_DOMAIN = "api.test"


class ScriptedAdapter(BaseAdapter):
    """Транспорт requests, отвечающий заранее заданными ответами и запоминающий запросы"""

    def __init__(self) -> None:
        super().__init__()
        self.routes: Dict[Tuple[str, str], Tuple[int, Any, Optional[Exception]]] = {}
        self.sent: List[requests.PreparedRequest] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        body: Any = None,
        exc: Optional[Exception] = None,
    ) -> None:
        self.routes[(method, path)] = (status, body, exc)

    def send(self, request, **kwargs):
        self.sent.append(request)
        status, body, exc = self.routes.get(
            (request.method, urlsplit(request.url).path),
            (404, {"detail": "Not Found"}, None),
        )
        if exc is not None:
            raise exc

        response = requests.Response()
        response.status_code = status
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_url=API_URL,
        api_timeout=5,
        token_cookie_domain=COOKIE_DOMAIN,
    )


@pytest.fixture
def adapter() -> ScriptedAdapter:
    return ScriptedAdapter()


@pytest.fixture
def http(adapter: ScriptedAdapter) -> requests.Session:
    session = requests.Session()
    session.trust_env = False
    session.mount("http://", adapter)
    return session


@pytest.fixture
def ctx(settings: Settings, http: requests.Session) -> SessionContext:
    context = create_session_context(settings, http=http)
    yield context
    context.close()


@pytest.fixture
def user_payload() -> Dict[str, Any]:
    return {"id": 7, "email": "a@example.com", "username": "alice"}
