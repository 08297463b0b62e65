"""Состояние сессии: флаг входа, кэш токена и заголовков авторизации."""

import logging
from typing import TYPE_CHECKING, Optional

from session_headers.core.storage import TokenStore
from session_headers.schemas import (
    AuthResponse,
    HeaderOptions,
    UserLogin,
    UserProfile,
    UserRegister,
)

if TYPE_CHECKING:
    from session_headers.api_client import AuthAPIClient

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Сессия текущего пользователя.

    Флаг `logged_in` и наличие токена не связаны между собой: хост-приложение
    выставляет их независимо (после логина кладет токен в хранилище и вызывает
    `set_logged_in(True)`).

    Заголовки из `get_auth_options()` пусты, пока не вызван
    `load_headers_from_token`, `sync_headers_from_stored_token` или
    `fetch_current_user`. Запросы, собранные до этого, уйдут без авторизации.
    """

    def __init__(
        self,
        api: "AuthAPIClient",
        token_store: TokenStore,
        token_key: str,
        token_path: str,
        logged_in: bool = False,
    ) -> None:
        """
        Args:
            api: Клиент эндпоинтов аутентификации
            token_store: Долговременное хранилище токена
            token_key: Имя cookie с токеном
            token_path: Путь cookie с токеном
            logged_in: Начальное значение флага входа
        """
        self.api = api
        self.token_store = token_store
        self.token_key = token_key
        self.token_path = token_path
        self._logged_in = logged_in
        self._token: Optional[str] = None
        self._auth_options = HeaderOptions()
        self._auth_options_without_content_type = HeaderOptions()
        self._user_data: Optional[UserProfile] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user_data(self) -> Optional[UserProfile]:
        return self._user_data

    def is_logged_in(self) -> bool:
        return self._logged_in

    def set_logged_in(self, value: bool) -> None:
        self._logged_in = value
        logger.info("Session login flag changed", extra={"logged_in": value})

    def login(self, credentials: UserLogin) -> AuthResponse:
        """
        Вход пользователя.

        Только сетевой вызов: сохранить токен и выставить флаг должен
        вызывающий код.

        Raises:
            AuthRejectedError: Неверные учетные данные
            AuthNetworkError: Backend недоступен
        """
        return self.api.login(credentials)

    def register(self, details: UserRegister) -> AuthResponse:
        """Регистрация; контракт как у `login`"""
        return self.api.register(details)

    def logout(self) -> None:
        """Удалить cookie токена и сбросить состояние сессии."""
        self.token_store.delete(self.token_key, self.token_path)
        self._logged_in = False
        self._token = None
        self._auth_options = HeaderOptions()
        self._auth_options_without_content_type = HeaderOptions()
        self._user_data = None
        logger.info("User logged out")

    def load_headers_from_token(self, token: str) -> None:
        """Вычислить и закэшировать оба варианта заголовков для токена"""
        self._token = token
        self._auth_options = HeaderOptions.for_token(token)
        self._auth_options_without_content_type = HeaderOptions.for_token(
            token, with_content_type=False
        )
        logger.debug(f"Auth headers loaded from token, length: {len(token)}")

    def fetch_current_user(self) -> UserProfile:
        """
        Загрузить профиль текущего пользователя по токену из хранилища.

        Токен читается из хранилища без проверки на пустоту: если его нет,
        запрос уйдет с пустым Bearer и backend его отклонит.

        Returns:
            Профиль пользователя (также сохраняется в `user_data`)

        Raises:
            AuthRejectedError: Backend не принял токен
            AuthNetworkError: Backend недоступен
            AuthResponseError: Некорректный ответ backend
        """
        token = self.token_store.get(self.token_key)
        self.load_headers_from_token(token)
        profile = self.api.get_user_info(self._auth_options.as_headers())
        self._user_data = profile
        logger.info("Fetched current user", extra={"user_id": profile.id})
        return profile

    def get_auth_options(self) -> HeaderOptions:
        return self._auth_options

    def get_auth_options_without_content_type(self) -> HeaderOptions:
        return self._auth_options_without_content_type

    def has_stored_token(self) -> bool:
        """Есть ли непустой токен в хранилище (кэш не трогается)"""
        return bool(self.token_store.get(self.token_key))

    def sync_headers_from_stored_token(self) -> None:
        """Загрузить заголовки из хранилища, если там есть непустой токен"""
        token = self.token_store.get(self.token_key)
        if token:
            self.load_headers_from_token(token)
        else:
            logger.debug("No stored token, auth headers left unchanged")
