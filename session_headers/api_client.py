"""API клиент для эндпоинтов аутентификации backend."""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from pydantic import BaseModel, ValidationError

from session_headers.constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_API_TIMEOUT,
    ENDPOINT_AUTH_LOGIN,
    ENDPOINT_AUTH_ME,
    ENDPOINT_AUTH_REGISTER,
    ERROR_BODY_PREVIEW_CHARS,
    HEADER_CONTENT_TYPE,
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_MULTIPLE_CHOICES,
    HTTP_OK,
)
from session_headers.core.exceptions import (
    AuthNetworkError,
    AuthRejectedError,
    AuthResponseError,
)
from session_headers.schemas import AuthResponse, UserLogin, UserProfile, UserRegister

logger = logging.getLogger(__name__)


class AuthAPIClient:
    """Клиент для /api/auth/* эндпоинтов."""

    def __init__(
        self,
        base_url: str,
        timeout: int = DEFAULT_API_TIMEOUT,
        http: Optional[requests.Session] = None,
    ) -> None:
        """
        Инициализация API клиента.

        Args:
            base_url: Базовый URL API
            timeout: Таймаут запросов в секундах
            http: HTTP сессия (по умолчанию создается новая)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http or requests.Session()
        self._json_headers = {HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON}

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def _handle_response(
        self,
        response: requests.Response,
        action: str,
    ) -> Dict[str, Any]:
        """
        Обработка ответа от сервера.

        Args:
            response: Ответ от сервера
            action: Название операции для логов и ошибок

        Returns:
            JSON данные

        Raises:
            AuthRejectedError: Сервер вернул 4xx
            AuthResponseError: 3xx, 5xx или тело не является JSON объектом
        """
        status = response.status_code
        if HTTP_OK <= status < HTTP_MULTIPLE_CHOICES:
            try:
                payload = response.json()
            except ValueError as e:
                logger.error(f"{action}: failed to parse JSON response: {e}")
                raise AuthResponseError(
                    f"{action}: response is not valid JSON",
                    details={"status": status},
                ) from e
            if not isinstance(payload, dict):
                raise AuthResponseError(
                    f"{action}: expected JSON object",
                    details={"status": status},
                )
            return payload

        preview = response.text[:ERROR_BODY_PREVIEW_CHARS]
        logger.error(f"{action} failed with status {status}: {preview}")
        details = {"status": status, "body": preview}
        if HTTP_BAD_REQUEST <= status < HTTP_INTERNAL_SERVER_ERROR:
            raise AuthRejectedError(f"{action} rejected by server", details=details)
        raise AuthResponseError(f"{action} failed on server", details=details)

    def _post(self, endpoint: str, data: BaseModel, action: str) -> Dict[str, Any]:
        try:
            response = self.http.post(
                self._url(endpoint),
                json=data.model_dump(exclude_none=True),
                headers=self._json_headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{action} failed: {e}")
            raise AuthNetworkError(f"{action}: no response from server", details={"reason": str(e)}) from e
        return self._handle_response(response, action)

    @staticmethod
    def _parse(model: type, payload: Dict[str, Any], action: str) -> Any:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"{action}: unexpected response shape: {e}")
            raise AuthResponseError(
                f"{action}: unexpected response shape",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def register(self, details: UserRegister) -> AuthResponse:
        """
        Регистрация нового пользователя.

        Args:
            details: Данные регистрации

        Returns:
            Данные пользователя и токен
        """
        payload = self._post(ENDPOINT_AUTH_REGISTER, details, "Registration")
        return self._parse(AuthResponse, payload, "Registration")

    def login(self, credentials: UserLogin) -> AuthResponse:
        """
        Вход пользователя.

        Args:
            credentials: Email и пароль

        Returns:
            Данные пользователя и токен
        """
        payload = self._post(ENDPOINT_AUTH_LOGIN, credentials, "Login")
        return self._parse(AuthResponse, payload, "Login")

    def get_user_info(self, headers: Mapping[str, str]) -> UserProfile:
        """
        Получение информации о текущем пользователе.

        Args:
            headers: Заголовки авторизации

        Returns:
            Профиль пользователя (поддерживается и обертка {"user": {...}})
        """
        try:
            response = self.http.get(
                self._url(ENDPOINT_AUTH_ME),
                headers=dict(headers),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Get user info failed: {e}")
            raise AuthNetworkError("Get user info: no response from server", details={"reason": str(e)}) from e

        payload = self._handle_response(response, "Get user info")
        user = payload.get("user", payload)
        if not isinstance(user, dict):
            raise AuthResponseError("Get user info: expected user object")
        return self._parse(UserProfile, user, "Get user info")
