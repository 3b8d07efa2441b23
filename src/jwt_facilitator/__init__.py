"""
jwt_facilitator

Thin helpers around PyJWT for issuing, verifying and decoding JSON Web
Tokens, plus route-protection adapters for FastAPI / Starlette and
Strawberry GraphQL.
"""

__version__ = "0.1.0"

from .domain.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_EXPIRES_IN,
    INVALID_TOKEN_MESSAGE,
    NO_TOKEN_MESSAGE,
    VerificationFailure,
)
from .domain.entities import VerificationResult
from .domain.exceptions import (
    TokenError,
    TokenSigningError,
    InvalidExpirationError,
    VerificationError,
    TokenExpiredError,
    InvalidTokenError,
    SignatureMismatchError,
)
from .domain.ports import TokenCodec
from .domain.settings import JWTSettings
from .domain.value_objects import BearerToken, Expiration

from .application.use_cases.sign import BuildTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase
from .application.use_cases.decode import DecodeTokenUseCase

from .adapters.pyjwt.codec import PyJWTCodec

from .integrations.common.token_factory import TokenService, create_token_service
from .integrations.common.env import settings_from_env, token_service_from_env

from .api import (
    build_token,
    verify_token,
    verify_token_detailed,
    decode_token,
    make_auth_middleware,
)

__all__ = [
    "__version__",
    # entry points
    "build_token",
    "verify_token",
    "verify_token_detailed",
    "decode_token",
    "make_auth_middleware",
    # domain core
    "DEFAULT_ALGORITHM",
    "DEFAULT_EXPIRES_IN",
    "INVALID_TOKEN_MESSAGE",
    "NO_TOKEN_MESSAGE",
    "VerificationFailure",
    "VerificationResult",
    "JWTSettings",
    "Expiration",
    "BearerToken",
    "TokenCodec",
    # exceptions
    "TokenError",
    "TokenSigningError",
    "InvalidExpirationError",
    "VerificationError",
    "TokenExpiredError",
    "InvalidTokenError",
    "SignatureMismatchError",
    # use cases
    "BuildTokenUseCase",
    "VerifyTokenUseCase",
    "DecodeTokenUseCase",
    # adapters / facades
    "PyJWTCodec",
    "TokenService",
    "create_token_service",
    "settings_from_env",
    "token_service_from_env",
]
