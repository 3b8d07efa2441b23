from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class TokenCodec(Protocol):
    """
    Port for turning claims into tokens and back.

    Implementations live in the adapters layer (e.g. the PyJWT codec).
    """

    def sign(self, claims: Mapping[str, Any], secret: str, algorithm: str) -> str:
        """
        Sign the given claims.

        Raises:
          - TokenSigningError
        """
        ...

    def verify(
        self,
        token: str,
        secret: str,
        algorithms: Sequence[str],
        leeway: int = 0,
    ) -> Mapping[str, Any]:
        """
        Verify signature and expiry, returning the claims.

        Raises:
          - TokenExpiredError
          - SignatureMismatchError
          - InvalidTokenError (malformed)
          - VerificationError (any other rejection)
        """
        ...

    def decode_unverified(self, token: str) -> Mapping[str, Any]:
        """
        Read the claims without any signature or expiry check.

        Raises:
          - InvalidTokenError
        """
        ...
