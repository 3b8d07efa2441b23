# tests/conftest.py
import pytest
from starlette.requests import Request

SECRET = "dev-mode-secret-at-least-32-bytes-long"
OTHER_SECRET = "another-secret-that-is-also-32-bytes!"


@pytest.fixture
def secret() -> str:
    return SECRET


@pytest.fixture
def other_secret() -> str:
    return OTHER_SECRET


@pytest.fixture
def make_request():
    """Factory for bare Starlette requests, no app involved."""

    def _make(path: str = "/me", authorization: str | None = None, method: str = "GET") -> Request:
        headers = []
        if authorization is not None:
            headers.append((b"authorization", authorization.encode("latin-1")))
        scope = {
            "type": "http",
            "method": method,
            "path": path,
            "root_path": "",
            "scheme": "http",
            "query_string": b"",
            "headers": headers,
            "server": ("testserver", 80),
            "client": ("testclient", 50000),
        }
        return Request(scope)

    return _make
