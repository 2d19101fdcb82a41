import json
from http import HTTPStatus
from typing import Any
from unittest.mock import patch

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from ghclient.github import Client, RateCache, rate_cache


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    url: str = "https://api.github.com/",
    method: str = "GET",
) -> requests.Response:
    """Build a real requests.Response as if it came off the wire.

    `body` may be bytes, a str, or anything JSON serializable.
    """
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode()
    else:
        content = json.dumps(body).encode()

    response = requests.Response()
    response.status_code = status_code
    try:
        response.reason = HTTPStatus(status_code).phrase
    except ValueError:
        response.reason = ""
    response._content = content
    response._content_consumed = True
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def mock_send():
    with patch.object(requests.Session, "send") as mock:
        yield mock


@pytest.fixture
def cache():
    return RateCache()


@pytest.fixture
def client(cache):
    return Client(requests.Session(), cache=cache)


@pytest.fixture(autouse=True)
def clear_rate_cache():
    rate_cache.clear()
    yield
    rate_cache.clear()
