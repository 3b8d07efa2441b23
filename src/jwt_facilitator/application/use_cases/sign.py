from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ...domain.constants import DEFAULT_ALGORITHM
from ...domain.exceptions import TokenSigningError
from ...domain.ports import TokenCodec
from ...domain.value_objects import Expiration, ExpiresIn


@dataclass(slots=True)
class BuildTokenUseCase:
    """
    Application use case:
    - Add standard claims (`iat`, `exp`) to a caller payload
    - Sign it via the TokenCodec port

    No validation of the payload beyond it being a mapping. Failures are
    raised, never swallowed.
    """

    codec: TokenCodec
    algorithm: str = DEFAULT_ALGORITHM
    clock: Callable[[], float] = time.time

    def execute(
            self,
            payload: Mapping[str, Any],
            secret: str,
            expires_in: Optional[ExpiresIn] = None,
    ) -> str:
        """
        Raises:
            TokenSigningError
            InvalidExpirationError
        """
        if not isinstance(payload, Mapping):
            raise TokenSigningError(
                f"Payload must be a mapping, got {type(payload).__name__}"
            )

        claims = dict(payload)
        issued_at = claims.get("iat")
        if issued_at is None:
            issued_at = int(self.clock())
            claims["iat"] = issued_at

        if expires_in is not None:
            if "exp" in claims:
                raise TokenSigningError(
                    "Payload already has an 'exp' claim; drop it or pass expires_in=None"
                )
            if not isinstance(issued_at, (int, float)) or isinstance(issued_at, bool):
                raise TokenSigningError("'iat' claim must be a number")
            claims["exp"] = Expiration.parse(expires_in).expires_at(int(issued_at))

        return self.codec.sign(claims, secret, self.algorithm)
