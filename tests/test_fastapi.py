# tests/test_fastapi.py
import asyncio
import json

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from jwt_facilitator import (
    INVALID_TOKEN_MESSAGE,
    NO_TOKEN_MESSAGE,
    VerificationFailure,
    build_token,
    make_auth_middleware,
)
from jwt_facilitator.integrations.fastapi import create_fastapi_auth, extract_token_from_request

MOCK_USER = {"id": 1, "username": "testUser"}


class RecordingNext:
    """Stands in for the next handler in the middleware chain."""

    def __init__(self):
        self.calls = []

    async def __call__(self, request):
        self.calls.append(request)
        return Response("ok")


def _body(response) -> dict:
    return json.loads(response.body)


# --- guard called directly ---------------------------------------------------


def test_guard_allows_valid_token(secret, make_request):
    token = build_token(MOCK_USER, secret)
    request = make_request(authorization=f"Bearer {token}")
    call_next = RecordingNext()

    response = asyncio.run(make_auth_middleware(secret)(request, call_next))

    assert response.status_code == 200
    assert len(call_next.calls) == 1
    assert request.state.user["id"] == MOCK_USER["id"]
    assert set(request.state.user) == {"id", "username", "iat", "exp"}
    assert request.scope["user"] == request.state.user


def test_guard_rejects_missing_token(secret, make_request):
    request = make_request()
    call_next = RecordingNext()

    response = asyncio.run(make_auth_middleware(secret)(request, call_next))

    assert response.status_code == 401
    assert _body(response) == {"error": "Access Denied: No Token Provided"}
    assert call_next.calls == []
    assert "user" not in request.scope


def test_guard_rejects_token_from_other_secret(secret, other_secret, make_request):
    token = build_token(MOCK_USER, other_secret)
    request = make_request(authorization=f"Bearer {token}")
    call_next = RecordingNext()

    response = asyncio.run(make_auth_middleware(secret)(request, call_next))

    assert response.status_code == 403
    assert _body(response) == {"error": "Invalid or Expired Token"}
    assert call_next.calls == []


@pytest.mark.parametrize("header", ["Bearer", "Bearer ", "Bearer  token"])
def test_guard_treats_empty_second_field_as_missing(secret, make_request, header):
    response = asyncio.run(make_auth_middleware(secret)(make_request(authorization=header), RecordingNext()))
    assert response.status_code == 401


def test_guard_authenticate_keeps_cause(secret, make_request):
    guard = make_auth_middleware(secret)
    token = build_token({"id": 1, "iat": 1000}, secret, "1h")

    result = guard.authenticate(make_request(authorization=f"Bearer {token}"))
    assert result.failure is VerificationFailure.EXPIRED

    result = guard.authenticate(make_request(authorization="Bearer garbage"))
    assert result.failure is VerificationFailure.MALFORMED

    result = guard.authenticate(make_request())
    assert result.failure is VerificationFailure.MISSING


def test_extract_token_from_request(make_request):
    assert extract_token_from_request(make_request()) is None
    assert extract_token_from_request(make_request(authorization="Bearer abc")) == "abc"
    assert extract_token_from_request(make_request(authorization="JWT abc")) == "abc"


# --- guard mounted on an app ---------------------------------------------------


@pytest.fixture
def app(secret) -> FastAPI:
    app = FastAPI()
    app.middleware("http")(make_auth_middleware(secret, exclude_paths=["/health"]))

    @app.get("/me")
    async def me(request: Request):
        return request.state.user

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def test_app_with_valid_token(app, secret):
    token = build_token(MOCK_USER, secret)
    response = TestClient(app).get("/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    user = response.json()
    assert user["id"] == 1
    assert user["username"] == "testUser"
    assert user["exp"] - user["iat"] == 3600


def test_app_without_token(app):
    response = TestClient(app).get("/me")
    assert response.status_code == 401
    assert response.json() == {"error": NO_TOKEN_MESSAGE}


def test_app_with_invalid_token(app, other_secret):
    token = build_token(MOCK_USER, other_secret)
    response = TestClient(app).get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"error": INVALID_TOKEN_MESSAGE}


def test_app_excluded_path(app):
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_guard_as_dispatch(secret):
    app = FastAPI()
    app.add_middleware(BaseHTTPMiddleware, dispatch=make_auth_middleware(secret))

    @app.get("/me")
    async def me(request: Request):
        return {"id": request.state.user["id"]}

    token = build_token(MOCK_USER, secret)
    client = TestClient(app)
    assert client.get("/me", headers={"Authorization": f"Bearer {token}"}).json() == {"id": 1}
    assert client.get("/me").status_code == 401


# --- dependencies ------------------------------------------------------------


@pytest.fixture
def deps_app(secret) -> FastAPI:
    fastapi_auth = create_fastapi_auth(secret=secret)
    app = FastAPI()

    @app.get("/me")
    async def me(user: dict = Depends(fastapi_auth.get_current_user)):
        return user

    @app.get("/maybe")
    async def maybe(user: dict | None = Depends(fastapi_auth.get_optional_user)):
        return {"anonymous": user is None}

    return app


def test_current_user_dependency(deps_app, secret, other_secret):
    client = TestClient(deps_app)
    token = build_token(MOCK_USER, secret)

    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "testUser"

    response = client.get("/me")
    assert response.status_code == 401
    assert response.json() == {"detail": NO_TOKEN_MESSAGE}

    bad = build_token(MOCK_USER, other_secret)
    response = client.get("/me", headers={"Authorization": f"Bearer {bad}"})
    assert response.status_code == 403
    assert response.json() == {"detail": INVALID_TOKEN_MESSAGE}


def test_optional_user_dependency(deps_app, secret):
    client = TestClient(deps_app)
    token = build_token(MOCK_USER, secret)

    assert client.get("/maybe").json() == {"anonymous": True}
    assert client.get("/maybe", headers={"Authorization": "Bearer nope"}).json() == {"anonymous": True}
    assert client.get("/maybe", headers={"Authorization": f"Bearer {token}"}).json() == {"anonymous": False}


def test_app_with_numeric_sub(app, secret):
    token = build_token({"sub": 1, "aud": "app"}, secret)
    response = TestClient(app).get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["sub"] == 1


def test_guard_keeps_existing_scope_user(secret, make_request):
    token = build_token(MOCK_USER, secret)
    request = make_request(authorization=f"Bearer {token}")
    request.scope["user"] = "set-by-another-middleware"
    call_next = RecordingNext()

    response = asyncio.run(make_auth_middleware(secret)(request, call_next))

    assert response.status_code == 200
    assert request.scope["user"] == "set-by-another-middleware"
    assert request.state.user["id"] == MOCK_USER["id"]


def test_dependencies_read_header_like_guard(deps_app, app, secret):
    token = build_token(MOCK_USER, secret)
    deps_client = TestClient(deps_app)
    guard_client = TestClient(app)

    # empty second field: no token for both
    headers = {"Authorization": f"Bearer  {token}"}
    assert deps_client.get("/me", headers=headers).status_code == 401
    assert guard_client.get("/me", headers=headers).status_code == 401
    assert deps_client.get("/maybe", headers=headers).json() == {"anonymous": True}

    # second field only, trailing fields ignored
    headers = {"Authorization": f"Bearer {token} trailing"}
    assert deps_client.get("/me", headers=headers).json()["id"] == 1
    assert guard_client.get("/me", headers=headers).json()["id"] == 1
