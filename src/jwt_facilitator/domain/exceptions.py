from .constants import VerificationFailure


class TokenError(Exception):
    """Base class for all token errors raised by this package."""
    pass


class TokenSigningError(TokenError):
    """Raised when a payload cannot be signed."""
    pass


class InvalidExpirationError(TokenError, ValueError):
    """Raised when an expiration descriptor cannot be parsed."""
    pass


class VerificationError(TokenError):
    """Raised by codecs when a token does not verify."""
    failure = VerificationFailure.INVALID


class TokenExpiredError(VerificationError):
    """Raised when token has expired."""
    failure = VerificationFailure.EXPIRED


class InvalidTokenError(VerificationError):
    """Raised when token is malformed."""
    failure = VerificationFailure.MALFORMED


class SignatureMismatchError(VerificationError):
    """Raised when the signature does not match the secret."""
    failure = VerificationFailure.SIGNATURE_MISMATCH
