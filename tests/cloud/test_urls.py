from __future__ import annotations

import pytest

from butler_cloud.cloud.urls import api_root, resolve_url


def test_resolve_url_appends_path_to_api_root() -> None:
    assert resolve_url('https://api.example.com/api/', 'projects.json') == 'https://api.example.com/api/projects.json'


def test_resolve_url_keeps_nested_paths() -> None:
    url = resolve_url('https://api.example.com/api/', 'login/user/abc.json')
    assert url == 'https://api.example.com/api/login/user/abc.json'


@pytest.mark.parametrize(
    'base, expected',
    [
        ('https://app.example.com', 'https://app.example.com/api/'),
        ('https://app.example.com/', 'https://app.example.com/api/'),
        ('https://app.example.com/some/page', 'https://app.example.com/api/'),
        ('http://localhost:3000', 'http://localhost:3000/api/'),
    ],
)
def test_api_root_replaces_path(base: str, expected: str) -> None:
    assert api_root(base) == expected
