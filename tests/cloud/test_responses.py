from __future__ import annotations

import httpx
import pytest

from butler_cloud.cloud.responses import HTTPRequestError, parse_response_json


@pytest.mark.parametrize('status', [204, 205])
def test_no_content_statuses_yield_none(status: int) -> None:
    response = httpx.Response(status, text='{"ignored": true}')
    assert parse_response_json(response) is None


@pytest.mark.parametrize('status, reason', [(400, 'Bad Request'), (404, 'Not Found'), (500, 'Internal Server Error')])
def test_error_statuses_raise_with_status_text_and_body(status: int, reason: str) -> None:
    response = httpx.Response(status, text='something broke')
    with pytest.raises(HTTPRequestError) as excinfo:
        parse_response_json(response)
    error = excinfo.value
    assert reason in str(error)
    assert 'something broke' in str(error)
    assert error.status_code == status
    assert error.status_text == reason
    assert error.body == 'something broke'


def test_success_returns_decoded_json() -> None:
    response = httpx.Response(200, json={'name': 'foo', 'tags': [1, 2]})
    assert parse_response_json(response) == {'name': 'foo', 'tags': [1, 2]}


def test_created_returns_decoded_json() -> None:
    response = httpx.Response(201, json=[{'name': 'foo'}])
    assert parse_response_json(response) == [{'name': 'foo'}]
