from __future__ import annotations

from typing import Optional

from .deps import FastAPIAuthorization
from .middleware import JWTAuthGuard, create_auth_guard, make_auth_middleware
from .security import bearer_scheme, extract_token_from_request
from ..common.token_factory import TokenService, create_token_service
from ...domain.constants import DEFAULT_ALGORITHM, DEFAULT_EXPIRES_IN
from ...domain.value_objects import ExpiresIn


def create_fastapi_auth(
    *,
    secret: str,
    expires_in: Optional[ExpiresIn] = DEFAULT_EXPIRES_IN,
    algorithm: str = DEFAULT_ALGORITHM,
    leeway: int = 0,
) -> FastAPIAuthorization:
    """
    High-level helper for FastAPI apps:

    - Creates a TokenService bound to `secret`
    - Wraps it in FastAPIAuthorization, exposing dependencies like:

        fastapi_auth.get_current_user
        fastapi_auth.get_optional_user

    For app-wide protection use `make_auth_middleware(secret)` instead.
    """
    service: TokenService = create_token_service(
        secret,
        expires_in=expires_in,
        algorithm=algorithm,
        leeway=leeway,
    )
    return FastAPIAuthorization(service=service)


__all__ = [
    "FastAPIAuthorization",
    "JWTAuthGuard",
    "bearer_scheme",
    "create_auth_guard",
    "create_fastapi_auth",
    "extract_token_from_request",
    "make_auth_middleware",
]
