from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


DEFAULT_CONTACT_DISCLAIMER_TEXT = (
    "The platform may also seek to contact you with the email address you use on this platform. "
    "This personal information is reserved for the platform's administrators and is not accessible "
    "to other users."
)


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str = "") -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


def _days(name: str) -> timedelta | None:
    value = _env(name)
    if not value:
        return None
    return timedelta(days=int(value))


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    jwt_secret: str
    available_authorizations: list[str]
    contact_disclaimer_text: str
    phone_number_length: int
    phone_allowed_prefixes: tuple[str, ...]
    authorization_expires_in: timedelta | None
    default_redirect_path: str
    admin_user_ids: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        jwt_secret=_env("JWT_SECRET", ""),
        available_authorizations=_csv("AVAILABLE_AUTHORIZATIONS", "phone_authorization_handler"),
        contact_disclaimer_text=_env("CONTACT_DISCLAIMER_TEXT", DEFAULT_CONTACT_DISCLAIMER_TEXT),
        phone_number_length=int(_env("PHONE_NUMBER_LENGTH", "10")),
        phone_allowed_prefixes=tuple(_csv("PHONE_ALLOWED_PREFIXES", "0")),
        authorization_expires_in=_days("AUTHORIZATION_EXPIRES_IN_DAYS"),
        default_redirect_path=_env("DEFAULT_REDIRECT_PATH", "/authorizations"),
        admin_user_ids=_csv("ADMIN_USER_IDS"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
