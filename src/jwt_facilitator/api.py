"""
Plain-function entry points.

Each call builds its own codec and use case; nothing is shared between
calls and no process-wide defaults are mutated. For repeated use with one
secret prefer `create_token_service(secret)`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .adapters.pyjwt.codec import PyJWTCodec
from .application.use_cases.decode import DecodeTokenUseCase
from .application.use_cases.sign import BuildTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase
from .domain.constants import DEFAULT_EXPIRES_IN
from .domain.entities import VerificationResult
from .domain.value_objects import ExpiresIn
from .integrations.fastapi.middleware import make_auth_middleware


def build_token(
        payload: Mapping[str, Any],
        secret: str,
        expires_in: Optional[ExpiresIn] = DEFAULT_EXPIRES_IN,
) -> str:
    """
    Sign `payload` (plus `iat`/`exp`) with `secret` using HS256.

    `expires_in` accepts seconds, a timedelta or a descriptor like "7d";
    None issues a token that never expires. Errors propagate.
    """
    return BuildTokenUseCase(codec=PyJWTCodec()).execute(payload, secret, expires_in)


def verify_token_detailed(token: Optional[str], secret: str) -> VerificationResult:
    """Verify `token`, keeping the failure cause when it does not verify."""
    return VerifyTokenUseCase(codec=PyJWTCodec()).execute(token, secret)


def verify_token(token: Optional[str], secret: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid, unexpired token, or None."""
    return verify_token_detailed(token, secret).claims


def decode_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Return a token's claims WITHOUT verifying it, or None if unparseable.

    Never use the result for authorization.
    """
    return DecodeTokenUseCase(codec=PyJWTCodec()).execute(token)


__all__ = [
    "build_token",
    "verify_token",
    "verify_token_detailed",
    "decode_token",
    "make_auth_middleware",
]
