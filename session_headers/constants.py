"""Константы клиента сессий."""

from typing import Final

# ===== HTTP STATUS CODES =====
HTTP_OK: Final[int] = 200
HTTP_MULTIPLE_CHOICES: Final[int] = 300
HTTP_BAD_REQUEST: Final[int] = 400
HTTP_INTERNAL_SERVER_ERROR: Final[int] = 500

# ===== API ENDPOINTS =====
ENDPOINT_AUTH_REGISTER: Final[str] = "/api/auth/register"
ENDPOINT_AUTH_LOGIN: Final[str] = "/api/auth/login"
ENDPOINT_AUTH_ME: Final[str] = "/api/auth/me"

# ===== HEADERS =====
HEADER_AUTHORIZATION: Final[str] = "Authorization"
HEADER_CONTENT_TYPE: Final[str] = "Content-Type"
CONTENT_TYPE_JSON: Final[str] = "application/json"
BEARER_PREFIX: Final[str] = "Bearer "

# ===== TOKEN COOKIE =====
TOKEN_COOKIE_NAME: Final[str] = "token"
TOKEN_COOKIE_PATH: Final[str] = "/"
TOKEN_COOKIE_DOMAIN: Final[str] = "localhost"

# ===== TIMEOUTS =====
DEFAULT_API_TIMEOUT: Final[int] = 60

# ===== PASSWORD / EMAIL VALIDATION =====
MIN_PASSWORD_LENGTH: Final[int] = 6
MAX_PASSWORD_LENGTH_BYTES: Final[int] = 72
MIN_EMAIL_LENGTH: Final[int] = 5
MAX_EMAIL_LENGTH: Final[int] = 255

# ===== LOGGING =====
ERROR_BODY_PREVIEW_CHARS: Final[int] = 200
