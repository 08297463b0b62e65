"""
Схемы учетных данных, профиля пользователя и заголовков авторизации
"""

import re
from typing import Dict, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from session_headers.constants import (
    BEARER_PREFIX,
    CONTENT_TYPE_JSON,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    MAX_EMAIL_LENGTH,
    MAX_PASSWORD_LENGTH_BYTES,
    MIN_EMAIL_LENGTH,
    MIN_PASSWORD_LENGTH,
)

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class UserLogin(BaseModel):
    """Учетные данные для входа; отправляются на backend без изменений"""

    email: str
    password: str


class UserRegister(BaseModel):
    """
    Данные для регистрации нового пользователя.

    Attributes:
        email: Email пользователя
        password: Пароль (минимум MIN_PASSWORD_LENGTH символов,
            не более MAX_PASSWORD_LENGTH_BYTES байт в UTF-8)
        username: Отображаемое имя (опционально)
    """

    email: str = Field(..., min_length=MIN_EMAIL_LENGTH, max_length=MAX_EMAIL_LENGTH)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    username: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not re.match(EMAIL_PATTERN, v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """
        Проверка ограничения bcrypt на стороне backend.

        Raises:
            ValueError: Если пароль длиннее MAX_PASSWORD_LENGTH_BYTES байт
        """
        if len(v.encode("utf-8")) > MAX_PASSWORD_LENGTH_BYTES:
            raise ValueError(
                f"Password must not exceed {MAX_PASSWORD_LENGTH_BYTES} bytes"
            )
        return v


class UserProfile(BaseModel):
    """Профиль пользователя, возвращаемый backend"""

    id: Union[int, str]
    email: Optional[str] = None
    username: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class AuthResponse(BaseModel):
    """Ответ login/register: идентичность пользователя и (опционально) токен"""

    access_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("access_token", "token"),
    )
    token_type: str = "bearer"
    user: UserProfile


class HeaderOptions(BaseModel):
    """
    Блок заголовков для авторизованных запросов.

    Пустой экземпляр означает, что заголовки еще не вычислены.
    """

    content_type: Optional[str] = None
    authorization: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_token(cls, token: str, with_content_type: bool = True) -> "HeaderOptions":
        """Собрать блок с `Bearer <token>`; токен вставляется без изменений"""
        return cls(
            content_type=CONTENT_TYPE_JSON if with_content_type else None,
            authorization=f"{BEARER_PREFIX}{token}",
        )

    def is_empty(self) -> bool:
        return self.content_type is None and self.authorization is None

    def as_headers(self) -> Dict[str, str]:
        """Заголовки в формате провода, без незаданных полей"""
        headers: Dict[str, str] = {}
        if self.content_type is not None:
            headers[HEADER_CONTENT_TYPE] = self.content_type
        if self.authorization is not None:
            headers[HEADER_AUTHORIZATION] = self.authorization
        return headers
