"""
Централизованная конфигурация клиента сессий
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from session_headers.constants import (
    DEFAULT_API_TIMEOUT,
    TOKEN_COOKIE_DOMAIN,
    TOKEN_COOKIE_NAME,
    TOKEN_COOKIE_PATH,
)


class Settings(BaseSettings):
    """Настройки клиента с валидацией через Pydantic"""

    # API
    api_url: str = "http://localhost:8000"
    api_timeout: int = DEFAULT_API_TIMEOUT

    # Cookie с токеном
    token_cookie_name: str = TOKEN_COOKIE_NAME
    token_cookie_path: str = TOKEN_COOKIE_PATH
    token_cookie_domain: str = TOKEN_COOKIE_DOMAIN
    token_cookie_file: Optional[str] = None

    # Начальное состояние сессии
    initial_logged_in: bool = False

    # Логирование
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Возвращает синглтон настроек"""
    return Settings()
