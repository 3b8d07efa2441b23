from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, FrozenSet, Iterable

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from ..common.token_factory import TokenService, create_token_service
from ...domain.constants import (
    INVALID_TOKEN_MESSAGE,
    NO_TOKEN_MESSAGE,
    VerificationFailure,
)
from ...domain.entities import VerificationResult
from .security import extract_token_from_request

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


@dataclass(slots=True)
class JWTAuthGuard:
    """
    HTTP middleware protecting routes with a bearer token.

    Per request:
      - no token                 -> 401 {"error": "Access Denied: No Token Provided"}
      - token fails verification -> 403 {"error": "Invalid or Expired Token"}
      - valid token              -> claims on `request.state.user` (and
                                    `request.scope["user"]`), then call_next

    `request.scope["user"]` is only set when nothing else (e.g. Starlette's
    AuthenticationMiddleware) has set it; `request.state.user` always holds
    the claims.

    Usage with FastAPI / Starlette:

        guard = make_auth_middleware(settings.JWT_SECRET)
        app.middleware("http")(guard)
        # or: app.add_middleware(BaseHTTPMiddleware, dispatch=guard)

    Handlers then read `request.state.user`.
    """

    service: TokenService
    exclude_paths: FrozenSet[str] = field(default_factory=frozenset)

    def authenticate(self, request: Request) -> VerificationResult:
        """Verify the request's bearer token against the guard's secret."""
        token = extract_token_from_request(request)
        return self.service.verify_detailed(token)

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        result = self.authenticate(request)

        if result.failure is VerificationFailure.MISSING:
            logger.info("Rejected %s %s: no token", request.method, request.url.path)
            return JSONResponse({"error": NO_TOKEN_MESSAGE}, status_code=401)

        if not result.ok:
            logger.info(
                "Rejected %s %s: %s token",
                request.method,
                request.url.path,
                result.failure.value,
            )
            return JSONResponse({"error": INVALID_TOKEN_MESSAGE}, status_code=403)

        request.state.user = result.claims
        request.scope.setdefault("user", result.claims)
        return await call_next(request)


def create_auth_guard(
    service: TokenService,
    *,
    exclude_paths: Iterable[str] = (),
) -> JWTAuthGuard:
    return JWTAuthGuard(service=service, exclude_paths=frozenset(exclude_paths))


def make_auth_middleware(secret: str, *, exclude_paths: Iterable[str] = ()) -> JWTAuthGuard:
    """Build a JWTAuthGuard verifying HS256 tokens signed with `secret`."""
    return create_auth_guard(create_token_service(secret), exclude_paths=exclude_paths)
