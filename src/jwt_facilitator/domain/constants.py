from enum import Enum

DEFAULT_EXPIRES_IN = "1h"
DEFAULT_ALGORITHM = "HS256"

NO_TOKEN_MESSAGE = "Access Denied: No Token Provided"
INVALID_TOKEN_MESSAGE = "Invalid or Expired Token"


class VerificationFailure(Enum):
    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    SIGNATURE_MISMATCH = "signature_mismatch"
    INVALID = "invalid"
