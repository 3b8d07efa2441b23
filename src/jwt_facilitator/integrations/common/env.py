from __future__ import annotations

import os

from ...domain.constants import DEFAULT_ALGORITHM, DEFAULT_EXPIRES_IN
from ...domain.settings import JWTSettings
from .token_factory import TokenService


def settings_from_env() -> JWTSettings:
    """
    Build JWTSettings from:

      JWT_SECRET      (required)
      JWT_EXPIRES_IN  (default "1h"; "none" disables `exp`)
      JWT_ALGORITHM   (default HS256)
      JWT_LEEWAY      (seconds, default 0)
    """
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("Missing JWT settings: JWT_SECRET")

    expires_in: str | None = os.getenv("JWT_EXPIRES_IN", DEFAULT_EXPIRES_IN).strip()
    if not expires_in or expires_in.lower() == "none":
        expires_in = None

    raw_leeway = os.getenv("JWT_LEEWAY", "0").strip() or "0"
    try:
        leeway = int(raw_leeway)
    except ValueError as exc:
        raise RuntimeError(f"JWT_LEEWAY must be an integer, got {raw_leeway!r}") from exc

    return JWTSettings(
        secret=secret,
        expires_in=expires_in,
        algorithm=os.getenv("JWT_ALGORITHM", DEFAULT_ALGORITHM).strip() or DEFAULT_ALGORITHM,
        leeway=leeway,
    )


def token_service_from_env() -> TokenService:
    """Convenience wrapper using env-configured settings."""
    return TokenService.from_settings(settings_from_env())
