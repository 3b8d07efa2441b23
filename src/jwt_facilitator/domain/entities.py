from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import VerificationFailure


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """
    Outcome of verifying a token.

    Exactly one of `claims` / `failure` is set. `detail` is a human-readable
    reason meant for logs only; never send it to clients.
    """
    claims: Optional[Dict[str, Any]] = None
    failure: Optional[VerificationFailure] = None
    detail: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.claims is None) == (self.failure is None):
            raise ValueError("VerificationResult needs either claims or a failure, not both")

    @classmethod
    def success(cls, claims: Dict[str, Any]) -> "VerificationResult":
        return cls(claims=dict(claims))

    @classmethod
    def failed(cls, failure: VerificationFailure, detail: Optional[str] = None) -> "VerificationResult":
        return cls(failure=failure, detail=detail)

    @property
    def ok(self) -> bool:
        return self.claims is not None

    @property
    def expired(self) -> bool:
        return self.failure is VerificationFailure.EXPIRED

    def __bool__(self) -> bool:
        return self.ok
