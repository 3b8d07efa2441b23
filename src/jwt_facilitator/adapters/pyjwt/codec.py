from typing import Any, Dict, Mapping, Sequence

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidSignatureError,
    PyJWTError,
)

from ...domain.exceptions import (
    InvalidTokenError,
    SignatureMismatchError,
    TokenExpiredError,
    TokenSigningError,
    VerificationError,
)
from ...domain.ports import TokenCodec


class PyJWTCodec(TokenCodec):
    """
    Adapter implementing TokenCodec port using PyJWT.

    Infrastructure layer:
    - Knows about JWT structure, signing and verification.
    - Translates PyJWT exceptions into domain exceptions.
    """

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def sign(self, claims: Mapping[str, Any], secret: str, algorithm: str) -> str:
        try:
            return jwt.encode(dict(claims), secret, algorithm=algorithm)
        except (PyJWTError, TypeError, ValueError) as exc:
            raise TokenSigningError(f"Could not sign token: {exc}") from exc

    def verify(
        self,
        token: str,
        secret: str,
        algorithms: Sequence[str],
        leeway: int = 0,
    ) -> Dict[str, Any]:
        """
        Decode and validate JWT token.

        Returns:
            Dict of token claims.

        Raises:
            TokenExpiredError
            SignatureMismatchError
            InvalidTokenError
            VerificationError
        """
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=list(algorithms),
                leeway=leeway,
                # payload claims are opaque here; signature, exp, nbf and iat are still checked
                options={"verify_aud": False, "verify_sub": False, "verify_jti": False},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        # InvalidSignatureError is a DecodeError, keep it first
        except InvalidSignatureError as exc:
            raise SignatureMismatchError("Signature verification failed") from exc
        except DecodeError as exc:
            raise InvalidTokenError(f"Malformed token: {exc}") from exc
        except PyJWTError as exc:
            raise VerificationError(f"Invalid token: {exc}") from exc

    def decode_unverified(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, options={"verify_signature": False})
        except PyJWTError as exc:
            raise InvalidTokenError(f"Malformed token: {exc}") from exc
