from __future__ import annotations

import httpx


def api_root(public_base_url: str) -> str:
    """Return the API root (``<origin>/api/``) for a public base URL."""

    return str(httpx.URL(public_base_url).join("/api/"))


def resolve_url(base: str | httpx.URL, path: str) -> str:
    """Resolve ``path`` against ``base``, which must already end in the API root."""

    return str(httpx.URL(base).join(path))


__all__ = ["api_root", "resolve_url"]
