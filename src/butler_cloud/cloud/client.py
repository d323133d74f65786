from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from butler_cloud.cloud.forms import FilePart, FormData
from butler_cloud.cloud.models import (
    EvaluatePromptParams,
    Feedback,
    LoginToken,
    Project,
    PromptEvaluation,
    User,
    build,
    build_list,
)
from butler_cloud.cloud.responses import parse_response_json
from butler_cloud.cloud.urls import api_root, resolve_url
from butler_cloud.config.settings import get_settings

LOGGER = logging.getLogger(__name__)

AUTH_HEADER = "X-Auth-Token"
DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

Body = Mapping[str, Any] | BaseModel | FormData


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def _json_payload(body: Mapping[str, Any] | BaseModel) -> bytes:
    if isinstance(body, BaseModel):
        data = body.model_dump(mode="json", exclude_none=True)
    else:
        data = {key: value for key, value in body.items() if value is not None}
    return json.dumps(data, separators=(",", ":")).encode("utf-8")


class CloudClient:
    """Typed wrapper around the cloud REST API.

    Every call opens a session from ``session_factory``, sends one request and
    returns the parsed JSON. Error statuses raise ``HTTPRequestError``.
    """

    def __init__(
        self,
        *,
        api_url: str | None = None,
        session_factory: Callable[[], httpx.AsyncClient] | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        self._api_url = httpx.URL(api_url or api_root(settings.api_base_url))
        request_timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._session_factory = session_factory or (lambda: httpx.AsyncClient(timeout=request_timeout))

    @property
    def api_url(self) -> str:
        return str(self._api_url)

    def url(self, path: str) -> str:
        return resolve_url(self._api_url, path)

    async def _send(
        self,
        path: str,
        method: RequestMethod,
        *,
        headers: Mapping[str, str] | None = None,
        body: Body | None = None,
    ) -> Any:
        url = self.url(path)
        request_headers = httpx.Headers(headers)
        request_kwargs: dict[str, Any] = {"headers": request_headers}
        if isinstance(body, FormData):
            if body:
                request_kwargs["files"] = body.to_httpx_files()
            else:
                # httpx sends no body at all for an empty ``files`` list.
                content_type, request_kwargs["content"] = body.empty_body()
                request_headers.setdefault("Content-Type", content_type)
        elif body is not None:
            request_kwargs["content"] = _json_payload(body)

        async with self._session_factory() as session:
            response = await session.request(RequestMethod(method).value, url, **request_kwargs)
        LOGGER.debug("%s %s -> %s", RequestMethod(method).value, url, response.status_code)
        return parse_response_json(response)

    async def make_request(
        self,
        path: str,
        method: RequestMethod,
        body: Body | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        # httpx writes the multipart content type with its boundary.
        merged = httpx.Headers() if isinstance(body, FormData) else httpx.Headers(DEFAULT_HEADERS)
        merged.update(headers or {})
        return await self._send(path, method, headers=merged, body=body)

    async def make_authenticated_request(
        self,
        path: str,
        method: RequestMethod,
        token: str,
        body: Body | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        authenticated = httpx.Headers(headers)
        authenticated[AUTH_HEADER] = token
        return await self.make_request(path, method, body, authenticated)

    async def create_login_token(self) -> LoginToken | None:
        data = await self._send(
            "login/token.json",
            RequestMethod.POST,
            headers=DEFAULT_HEADERS,
            body={},
        )
        token = build(LoginToken, data)
        if token is None:
            return None
        # The server may answer with its own host; point the link at ours.
        url = httpx.URL(token.url)
        port = self._api_url.port if self._api_url.port is not None else url.port
        url = url.copy_with(host=self._api_url.host, port=port)
        return token.model_copy(update={"url": str(url)})

    async def get_login_user(self, token: str) -> User | None:
        data = await self._send(f"login/user/{token}.json", RequestMethod.GET)
        return build(User, data)

    async def create_feedback(
        self,
        token: str | None,
        *,
        message: str,
        email: str | None = None,
        context: str | None = None,
        logs: FilePart | None = None,
        data: FilePart | None = None,
        repo: FilePart | None = None,
    ) -> Feedback | None:
        form = FormData()
        form.append("message", message)
        if email:
            form.append("email", email)
        if context:
            form.append("context", context)
        if logs:
            form.append("logs", logs)
        if repo:
            form.append("repo", repo)
        if data:
            form.append("data", data)
        headers = {AUTH_HEADER: token} if token else {}
        result = await self._send("feedback", RequestMethod.PUT, headers=headers, body=form)
        return build(Feedback, result)

    async def get_user(self, token: str) -> User | None:
        data = await self._send("user.json", RequestMethod.GET, headers={AUTH_HEADER: token})
        return build(User, data)

    async def update_user(
        self,
        token: str,
        *,
        name: str | None = None,
        picture: FilePart | None = None,
    ) -> User | None:
        form = FormData()
        if name:
            form.append("name", name)
        if picture:
            form.append("avatar", picture)
        data = await self._send("user.json", RequestMethod.PUT, headers={AUTH_HEADER: token}, body=form)
        return build(User, data)

    async def evaluate_ai_prompt(self, token: str, params: EvaluatePromptParams) -> PromptEvaluation | None:
        data = await self._send(
            "evaluate_prompt/predict.json",
            RequestMethod.POST,
            headers={**DEFAULT_HEADERS, AUTH_HEADER: token},
            body=params,
        )
        return build(PromptEvaluation, data)

    async def create_project(
        self,
        token: str,
        *,
        name: str,
        description: str | None = None,
        uid: str | None = None,
    ) -> Project | None:
        data = await self._send(
            "projects.json",
            RequestMethod.POST,
            headers={**DEFAULT_HEADERS, AUTH_HEADER: token},
            body={"name": name, "description": description, "uid": uid},
        )
        return build(Project, data)

    async def update_project(
        self,
        token: str,
        repository_id: str,
        *,
        name: str,
        description: str | None = None,
    ) -> Project | None:
        data = await self._send(
            f"projects/{repository_id}.json",
            RequestMethod.PUT,
            headers={**DEFAULT_HEADERS, AUTH_HEADER: token},
            body={"name": name, "description": description},
        )
        return build(Project, data)

    async def list_projects(self, token: str) -> list[Project]:
        data = await self._send("projects.json", RequestMethod.GET, headers={AUTH_HEADER: token})
        return build_list(Project, data)

    async def get_project(self, token: str, repository_id: str) -> Project | None:
        data = await self._send(f"projects/{repository_id}.json", RequestMethod.GET, headers={AUTH_HEADER: token})
        return build(Project, data)

    async def delete_project(self, token: str, repository_id: str) -> None:
        await self._send(f"projects/{repository_id}.json", RequestMethod.DELETE, headers={AUTH_HEADER: token})


__all__ = ["AUTH_HEADER", "CloudClient", "RequestMethod"]
