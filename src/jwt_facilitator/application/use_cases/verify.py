from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ...domain.constants import DEFAULT_ALGORITHM, VerificationFailure
from ...domain.entities import VerificationResult
from ...domain.exceptions import VerificationError
from ...domain.ports import TokenCodec

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerifyTokenUseCase:
    """
    Application use case:
    - Verify a token via TokenCodec port
    - Turn every verification failure into a VerificationResult

    Never raises for a bad token; callers branch on `result.failure`.
    """

    codec: TokenCodec
    algorithm: str = DEFAULT_ALGORITHM
    leeway: int = 0

    def execute(self, token: Optional[str], secret: str) -> VerificationResult:
        if not token:
            return VerificationResult.failed(VerificationFailure.MISSING, "No token")

        if not secret:
            logger.debug("Refusing to verify token against an empty secret")
            return VerificationResult.failed(VerificationFailure.INVALID, "Empty secret")

        try:
            claims = self.codec.verify(
                token,
                secret,
                algorithms=[self.algorithm],
                leeway=self.leeway,
            )
        except VerificationError as exc:
            logger.debug("Token verification failed (%s): %s", exc.failure.value, exc)
            return VerificationResult.failed(exc.failure, str(exc))

        return VerificationResult.success(claims)
