from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Iterator

import httpx
import pytest

from butler_cloud.config import settings as settings_module


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("BUTLER_CLOUD_AUTH_TOKEN", "BUTLER_CLOUD_API_BASE_URL", "BUTLER_CLOUD_IPC_URL"):
        monkeypatch.delenv(key, raising=False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


class RecordingTransport:
    """Answers every request with a canned response and remembers what was sent."""

    def __init__(self, status_code: int = 200, payload: Any = None, *, text: str | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.payload is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.payload)

    def session_factory(self) -> Callable[[], httpx.AsyncClient]:
        return lambda: httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
