from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request
from ..common.token_factory import TokenService
from ...domain.constants import INVALID_TOKEN_MESSAGE, NO_TOKEN_MESSAGE


@dataclass(slots=True)
class FastAPIAuthorization:
    """
    FastAPI dependencies on top of the framework-agnostic TokenService.

    Same outcomes as JWTAuthGuard, but per route instead of per app.
    `credentials` only registers the bearer scheme in OpenAPI; the token
    itself is read from the raw header, exactly as the guard does.
    """

    service: TokenService

    async def get_current_user(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> Dict[str, Any]:
        """Dependency: Require a valid token, return its claims."""
        token = extract_token_from_request(request)
        if not token:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=NO_TOKEN_MESSAGE,
            )

        claims = self.service.verify(token)
        if claims is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=INVALID_TOKEN_MESSAGE,
            )

        request.state.user = claims
        return claims

    async def get_optional_user(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> Optional[Dict[str, Any]]:
        """Dependency: Optional authentication."""
        token = extract_token_from_request(request)
        # no token or bad token -> anonymous
        return self.service.verify(token)
