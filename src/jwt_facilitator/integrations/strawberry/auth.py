from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from graphql import GraphQLError
from starlette.requests import Request
from strawberry.permission import BasePermission
from strawberry.types import Info

from ..common.token_factory import TokenService, create_token_service
from ..fastapi.security import extract_token_from_request
from ...domain.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_EXPIRES_IN,
    INVALID_TOKEN_MESSAGE,
    NO_TOKEN_MESSAGE,
)
from ...domain.value_objects import ExpiresIn

logger = logging.getLogger(__name__)

ExtraFactory = Callable[[Request, Optional[Dict[str, Any]]], Any]


# --------------------------------------------------------------------- #
# Context type used by Strawberry
# --------------------------------------------------------------------- #

@dataclass(slots=True)
class StrawberryAuthContext:
    """
    Default context type for Strawberry GraphQL.

    `user` holds the verified claims, or None for anonymous requests.
    """
    request: Request
    user: Optional[Dict[str, Any]] = None
    extra: Any = None  # host app can put UoW, services, etc. here if desired


# --------------------------------------------------------------------- #
# Main integration: StrawberryAuth
# --------------------------------------------------------------------- #

@dataclass(slots=True)
class StrawberryAuth:
    """
    Strawberry GraphQL integration built on TokenService.

    Responsibilities:
      - provide a `context_getter` for Strawberry's GraphQLRouter
      - provide a permission class you can attach to fields/mutations
    """

    service: TokenService

    def make_context_getter(
        self,
        *,
        optional: bool = True,
        extra_factory: Optional[ExtraFactory] = None,
    ):
        """
        Build an async function compatible with:

            strawberry.fastapi.GraphQLRouter(context_getter=...)

        Args:
            optional:
                - True:   missing or bad tokens become `user=None` in context
                - False:  they become GraphQL errors
            extra_factory:
                - Optional callable: (request, claims | None) -> Any
                - Whatever it returns will be stored on context.extra
        """

        def _anonymous(request: Request, message: str) -> StrawberryAuthContext:
            if not optional:
                raise GraphQLError(message)
            extra = extra_factory(request, None) if extra_factory else None
            return StrawberryAuthContext(request=request, user=None, extra=extra)

        async def _context_getter(request: Request) -> StrawberryAuthContext:
            token = extract_token_from_request(request)
            if not token:
                return _anonymous(request, NO_TOKEN_MESSAGE)

            result = self.service.verify_detailed(token)
            if not result.ok:
                logger.debug("GraphQL request with %s token", result.failure.value)
                return _anonymous(request, INVALID_TOKEN_MESSAGE)

            extra = extra_factory(request, result.claims) if extra_factory else None
            return StrawberryAuthContext(request=request, user=result.claims, extra=extra)

        return _context_getter

    def require_authenticated(self) -> Type[BasePermission]:
        """
        Permission: user must be authenticated (context.user is not None).

        Example:

            IsAuthenticated = strawberry_auth.require_authenticated()

            @strawberry.field(permission_classes=[IsAuthenticated])
            def me(self, info: Info) -> str:
                return info.context.user["sub"]
        """

        class _RequireAuthenticated(BasePermission):
            message = NO_TOKEN_MESSAGE

            def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
                ctx: StrawberryAuthContext = info.context
                return ctx.user is not None

        return _RequireAuthenticated


def create_strawberry_auth(
    *,
    secret: str,
    expires_in: Optional[ExpiresIn] = DEFAULT_EXPIRES_IN,
    algorithm: str = DEFAULT_ALGORITHM,
    leeway: int = 0,
) -> StrawberryAuth:
    """
    Convenience helper:

        strawberry_auth = create_strawberry_auth(secret=settings.JWT_SECRET)
        graphql_app = GraphQLRouter(
            schema,
            context_getter=strawberry_auth.make_context_getter(),
        )
    """
    service = create_token_service(
        secret,
        expires_in=expires_in,
        algorithm=algorithm,
        leeway=leeway,
    )
    return StrawberryAuth(service=service)
