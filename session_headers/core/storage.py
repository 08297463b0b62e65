"""Хранилище токена на основе cookie jar."""

import logging
import os
from http.cookiejar import CookieJar, FileCookieJar, LWPCookieJar
from typing import Optional, Protocol

from requests.cookies import RequestsCookieJar, create_cookie

from session_headers.constants import (
    TOKEN_COOKIE_DOMAIN,
    TOKEN_COOKIE_NAME,
    TOKEN_COOKIE_PATH,
)

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Источник актуального токена для перехватчика запросов"""

    def get(self) -> Optional[str]:
        ...


class TokenStore(Protocol):
    """Долговременное key-value хранилище токена"""

    def get(self, key: str) -> str:
        ...

    def set(self, key: str, value: str, path: str) -> None:
        ...

    def delete(self, key: str, path: str) -> None:
        ...

    def exists(self, key: str) -> bool:
        ...


class CookieTokenStore:
    """
    Токен в cookie jar, с опциональным сохранением в LWP-файл.

    `get()` без аргументов читает cookie по умолчанию, поэтому экземпляр
    одновременно является TokenSource.
    """

    def __init__(
        self,
        jar: Optional[CookieJar] = None,
        filename: Optional[str] = None,
        domain: str = TOKEN_COOKIE_DOMAIN,
        default_key: str = TOKEN_COOKIE_NAME,
        default_path: str = TOKEN_COOKIE_PATH,
    ) -> None:
        """
        Args:
            jar: Готовый cookie jar (по умолчанию создается новый)
            filename: Файл для сохранения cookie между перезапусками
            domain: Домен, к которому привязана cookie токена
            default_key: Имя cookie с токеном
            default_path: Путь cookie с токеном
        """
        if jar is None:
            if filename:
                jar = LWPCookieJar(filename)
                if os.path.exists(filename):
                    jar.load(ignore_discard=True, ignore_expires=True)
                    logger.info("Loaded token cookies", extra={"cookie_file": filename})
            else:
                jar = RequestsCookieJar()
        self._jar = jar
        self.domain = domain
        self.default_key = default_key
        self.default_path = default_path

    @property
    def jar(self) -> CookieJar:
        return self._jar

    def _save(self) -> None:
        if isinstance(self._jar, FileCookieJar) and self._jar.filename:
            self._jar.save(ignore_discard=True, ignore_expires=True)

    def get(self, key: Optional[str] = None) -> str:
        """
        Получить значение cookie.

        Returns:
            Значение или пустая строка, если cookie нет
        """
        key = key or self.default_key
        for cookie in self._jar:
            if cookie.name == key and cookie.domain == self.domain:
                return cookie.value or ""
        return ""

    def set(self, key: str, value: str, path: Optional[str] = None) -> None:
        """Сохранить cookie (вызывается потоком логина хост-приложения)"""
        cookie = create_cookie(key, value, domain=self.domain, path=path or self.default_path)
        self._jar.set_cookie(cookie)
        self._save()
        logger.info(f"[SAVE_TOKEN] Cookie '{key}' saved, length: {len(value)}")

    def delete(self, key: Optional[str] = None, path: Optional[str] = None) -> None:
        """Удалить cookie; отсутствие cookie не ошибка"""
        key = key or self.default_key
        try:
            self._jar.clear(self.domain, path or self.default_path, key)
        except KeyError:
            logger.debug(f"[REMOVE_TOKEN] Cookie '{key}' not present, nothing to remove")
            return
        self._save()
        logger.info(f"[REMOVE_TOKEN] Cookie '{key}' removed")

    def exists(self, key: Optional[str] = None) -> bool:
        key = key or self.default_key
        return any(
            cookie.name == key and cookie.domain == self.domain for cookie in self._jar
        )
