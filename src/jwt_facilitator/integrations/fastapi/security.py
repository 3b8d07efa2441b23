from __future__ import annotations

from typing import Optional

from fastapi.security import HTTPBearer
from starlette.requests import HTTPConnection

from ...domain.value_objects import BearerToken

# Expose this so apps can plug it into dependencies if they want OpenAPI security
bearer_scheme = HTTPBearer(auto_error=False)

AUTHORIZATION_HEADER = "Authorization"


def extract_token_from_request(request: HTTPConnection) -> Optional[str]:
    """
    Extract an access token from the raw Authorization header: the second
    space-delimited field, verbatim.

    Middleware, dependencies and the GraphQL context all read the token
    here, so "Bearer  abc" is "no token" everywhere.

    Returns None if no token is found.
    """
    bearer = BearerToken.from_header(request.headers.get(AUTHORIZATION_HEADER))
    return bearer.value if bearer else None
