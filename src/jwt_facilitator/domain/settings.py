from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_ALGORITHM, DEFAULT_EXPIRES_IN
from .value_objects import Expiration, ExpiresIn


@dataclass(slots=True)
class JWTSettings:
    """
    Signing / verification settings.

    Host code decides how to construct this (env, config file, etc.).
    `expires_in=None` issues tokens without an `exp` claim.
    """
    secret: str
    expires_in: Optional[ExpiresIn] = DEFAULT_EXPIRES_IN
    algorithm: str = DEFAULT_ALGORITHM
    leeway: int = 0

    def __post_init__(self) -> None:
        # fail at construction rather than on the first token
        if self.expires_in is not None:
            Expiration.parse(self.expires_in)

    @property
    def expiration(self) -> Optional[Expiration]:
        if self.expires_in is None:
            return None
        return Expiration.parse(self.expires_in)
