# src/jwt_facilitator/domain/value_objects.py

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from .exceptions import InvalidExpirationError

ExpiresIn = Union[str, int, float, timedelta]


# --- Expiration ----------------------------------------------------------

_SECOND = 1000
_MINUTE = _SECOND * 60
_HOUR = _MINUTE * 60
_DAY = _HOUR * 24
_WEEK = _DAY * 7
_YEAR = _DAY * 365.25

_UNITS_MS = {
    "years": _YEAR, "year": _YEAR, "yrs": _YEAR, "yr": _YEAR, "y": _YEAR,
    "weeks": _WEEK, "week": _WEEK, "w": _WEEK,
    "days": _DAY, "day": _DAY, "d": _DAY,
    "hours": _HOUR, "hour": _HOUR, "hrs": _HOUR, "hr": _HOUR, "h": _HOUR,
    "minutes": _MINUTE, "minute": _MINUTE, "mins": _MINUTE, "min": _MINUTE, "m": _MINUTE,
    "seconds": _SECOND, "second": _SECOND, "secs": _SECOND, "sec": _SECOND, "s": _SECOND,
    "milliseconds": 1, "millisecond": 1, "msecs": 1, "msec": 1, "ms": 1,
}

_DESCRIPTOR_RE = re.compile(r"^(-?(?:\d+)?\.?\d+) *([a-z]+)?$", re.IGNORECASE)


def _descriptor_to_ms(raw: str) -> float:
    """
    Parse strings such as "1h", "7d", "2.5 hrs" or "90000".

    A unitless number is read as milliseconds.
    """
    match = _DESCRIPTOR_RE.match(raw.strip())
    if not match:
        raise InvalidExpirationError(f"Invalid expiration: {raw!r}")

    amount = float(match.group(1))
    unit = (match.group(2) or "ms").lower()
    if unit not in _UNITS_MS:
        raise InvalidExpirationError(f"Unknown expiration unit {unit!r} in {raw!r}")
    return amount * _UNITS_MS[unit]


@dataclass(frozen=True, slots=True)
class Expiration:
    """
    Token lifetime in whole seconds, relative to the `iat` claim.

    Built from an integer/float number of seconds, a `timedelta`, or a
    human-readable descriptor ("1h", "7d", "30 minutes").
    """
    seconds: int

    @classmethod
    def parse(cls, value: ExpiresIn) -> "Expiration":
        if isinstance(value, Expiration):
            return value
        if isinstance(value, bool):
            raise InvalidExpirationError(f"Invalid expiration: {value!r}")
        if isinstance(value, timedelta):
            return cls(math.floor(value.total_seconds()))
        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise InvalidExpirationError(f"Invalid expiration: {value!r}")
            return cls(math.floor(value))
        if isinstance(value, str):
            return cls(math.floor(_descriptor_to_ms(value) / 1000))
        raise InvalidExpirationError(
            f"Expiration must be a number of seconds, a timedelta or a string, got {type(value).__name__}"
        )

    def expires_at(self, issued_at: int) -> int:
        return issued_at + self.seconds


# --- Bearer token --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BearerToken:
    """
    Raw token taken from an `Authorization` header.

    The header is split on single spaces and the second field is used
    verbatim; the scheme word itself is not checked.
    """
    value: str

    @classmethod
    def from_header(cls, header: Optional[str]) -> Optional["BearerToken"]:
        if not header:
            return None
        parts = header.split(" ")
        if len(parts) < 2 or not parts[1]:
            return None
        return cls(parts[1])

    def __str__(self) -> str:
        return self.value
