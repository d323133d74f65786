from __future__ import annotations

from typing import Any

import httpx

NO_BODY_STATUSES = frozenset({204, 205})


class CloudError(Exception):
    """Base class for errors raised by the cloud client."""


class HTTPRequestError(CloudError):
    """The API answered with a client or server error status."""

    def __init__(self, status_code: int, status_text: str, body: str) -> None:
        super().__init__(f"HTTP Error {status_text}: {body}")
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


def parse_response_json(response: httpx.Response) -> Any:
    if response.status_code in NO_BODY_STATUSES:
        return None
    if response.status_code >= 400:
        raise HTTPRequestError(response.status_code, response.reason_phrase, response.text)
    return response.json()


__all__ = ["CloudError", "HTTPRequestError", "parse_response_json"]
