from __future__ import annotations

import json
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from butler_cloud.cloud.responses import parse_response_json
from butler_cloud.cloud.urls import resolve_url
from butler_cloud.config.settings import get_settings

Invoker = Callable[[str, Mapping[str, Any]], Awaitable[Any]]


async def invoke(
    command: str,
    params: Mapping[str, Any] | None = None,
    *,
    session_factory: Callable[[], httpx.AsyncClient] | None = None,
) -> Any:
    """Run ``command`` on the local application backend and return its result."""

    settings = get_settings()
    factory = session_factory or (lambda: httpx.AsyncClient(timeout=settings.request_timeout_seconds))
    url = resolve_url(settings.ipc_url, command)
    payload = json.dumps(dict(params or {}), separators=(",", ":")).encode("utf-8")
    async with factory() as session:
        response = await session.post(url, content=payload, headers={"Content-Type": "application/json"})
    return parse_response_json(response)


__all__ = ["Invoker", "invoke"]
