from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_base_url(value: Any) -> str:
    text = str(value).strip()
    if not text:
        raise ValueError('base URL must not be empty')
    if not text.endswith('/'):
        text += '/'
    return text


BaseURL = Annotated[str, BeforeValidator(_parse_base_url)]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_prefix='BUTLER_CLOUD_',
        extra='ignore',
    )

    api_base_url: BaseURL = 'https://app.gitbutler.com/'
    ipc_url: BaseURL = 'http://127.0.0.1:7091/ipc/'
    auth_token: str | None = None
    request_timeout_seconds: float = 10.0
    login_poll_interval_seconds: float = 2.0
    login_timeout_seconds: float = 300.0
    log_level: str = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
