from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ...adapters.pyjwt.codec import PyJWTCodec
from ...application.use_cases.decode import DecodeTokenUseCase
from ...application.use_cases.sign import BuildTokenUseCase
from ...application.use_cases.verify import VerifyTokenUseCase
from ...domain.constants import DEFAULT_ALGORITHM, DEFAULT_EXPIRES_IN
from ...domain.entities import VerificationResult
from ...domain.ports import TokenCodec
from ...domain.settings import JWTSettings
from ...domain.value_objects import ExpiresIn

# distinguishes "use the configured expiration" from an explicit None
_CONFIGURED: Any = object()


@dataclass(slots=True)
class TokenService:
    """
    Framework-agnostic token facade bound to one secret.

    Integrations (FastAPI, Strawberry, etc.) adapt this to their own
    middleware / dependency systems.
    """

    settings: JWTSettings
    build_use_case: BuildTokenUseCase
    verify_use_case: VerifyTokenUseCase
    decode_use_case: DecodeTokenUseCase

    @classmethod
    def from_settings(
            cls,
            settings: JWTSettings,
            codec: Optional[TokenCodec] = None,
    ) -> "TokenService":
        codec = codec or PyJWTCodec()
        return cls(
            settings=settings,
            build_use_case=BuildTokenUseCase(codec=codec, algorithm=settings.algorithm),
            verify_use_case=VerifyTokenUseCase(
                codec=codec,
                algorithm=settings.algorithm,
                leeway=settings.leeway,
            ),
            decode_use_case=DecodeTokenUseCase(codec=codec),
        )

    # --- Core operations --------------------------------------------------

    def build(
            self,
            payload: Mapping[str, Any],
            *,
            expires_in: Optional[ExpiresIn] = _CONFIGURED,
    ) -> str:
        """Payload -> signed token (or raise signing errors)."""
        if expires_in is _CONFIGURED:
            expires_in = self.settings.expires_in
        return self.build_use_case.execute(payload, self.settings.secret, expires_in)

    def verify(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Token -> claims, or None for any verification failure."""
        return self.verify_use_case.execute(token, self.settings.secret).claims

    def verify_detailed(self, token: Optional[str]) -> VerificationResult:
        """Token -> VerificationResult keeping the failure cause."""
        return self.verify_use_case.execute(token, self.settings.secret)

    def decode(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Token -> unverified claims, or None if unparseable."""
        return self.decode_use_case.execute(token)


def create_token_service(
        secret: str,
        *,
        expires_in: Optional[ExpiresIn] = DEFAULT_EXPIRES_IN,
        algorithm: str = DEFAULT_ALGORITHM,
        leeway: int = 0,
) -> TokenService:
    """
    High-level factory: secret + options -> TokenService.

    - builds a JWTSettings (validating the expiration)
    - wires a PyJWTCodec into the build / verify / decode use cases
    - returns a TokenService facade.
    """
    settings = JWTSettings(
        secret=secret,
        expires_in=expires_in,
        algorithm=algorithm,
        leeway=leeway,
    )
    return TokenService.from_settings(settings)
