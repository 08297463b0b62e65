"""
Кастомные исключения клиента сессий
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Базовое исключение с поддержкой HTTP статус кодов"""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.details = details or {}
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация исключения в словарь"""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Auth exceptions
class AuthError(AppException):
    """Базовая ошибка аутентификации"""

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"


class AuthRejectedError(AuthError):
    """Backend отклонил запрос (неверные учетные данные, невалидный токен)"""

    status_code = 401
    error_code = "AUTH_REJECTED"


class AuthNetworkError(AuthError):
    """Ответ не получен: ошибка соединения, таймаут"""

    status_code = 503
    error_code = "AUTH_NETWORK_ERROR"


class AuthResponseError(AuthError):
    """Ответ получен, но непригоден: 5xx или неожиданный формат тела"""

    status_code = 502
    error_code = "AUTH_BAD_RESPONSE"
