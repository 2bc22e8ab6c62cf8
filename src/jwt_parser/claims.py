"""
Registered claim names and date normalisation.

The registered date claims carry Unix timestamps (seconds).  After JSON
decoding they are replaced by timezone-aware ``datetime`` instants so
consumers never have to guess whether a value is a number or a time.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from .errors import InvalidDateClaim

__all__ = [
    "RegisteredClaims",
    "DATE_CLAIMS",
    "EPOCH",
    "to_instant",
    "normalize_dates",
]

logger = logging.getLogger(__name__)


class RegisteredClaims:
    """Claim names registered by RFC 7519, section 4.1."""

    AUDIENCE = "aud"
    EXPIRATION_TIME = "exp"
    ID = "jti"
    ISSUED_AT = "iat"
    ISSUER = "iss"
    NOT_BEFORE = "nbf"
    SUBJECT = "sub"

    ALL = (AUDIENCE, EXPIRATION_TIME, ID, ISSUED_AT, ISSUER, NOT_BEFORE, SUBJECT)


DATE_CLAIMS = (
    RegisteredClaims.ISSUED_AT,
    RegisteredClaims.NOT_BEFORE,
    RegisteredClaims.EXPIRATION_TIME,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)([eE][+-]?[0-9]+)?")


def _to_seconds(name: str, value: Any) -> int:
    """Coerce a decoded JSON value to whole Unix seconds.

    Integers pass through, booleans become 0/1, ``null`` becomes 0,
    finite floats and numeric strings are truncated toward zero.
    Everything else is rejected.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidDateClaim(f"Claim {name!r} is not a finite number: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            if _INT_RE.fullmatch(text):
                return int(text)
            if _FLOAT_RE.fullmatch(text):
                return _to_seconds(name, float(text))
        except ValueError as exc:
            raise InvalidDateClaim(f"Claim {name!r} is not a usable timestamp: {exc}") from exc
        raise InvalidDateClaim(f"Claim {name!r} is not a numeric timestamp: {value!r}")
    raise InvalidDateClaim(
        f"Claim {name!r} must be a number, got {type(value).__name__}"
    )


def to_instant(name: str, value: Any) -> datetime:
    """Return the UTC instant ``EPOCH + value`` seconds.

    Raises:
        InvalidDateClaim: If *value* cannot be coerced or falls outside
            the range ``datetime`` can represent.
    """
    seconds = _to_seconds(name, value)
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError as exc:
        raise InvalidDateClaim(
            f"Claim {name!r} is out of the supported date range: {seconds}"
        ) from exc


def normalize_dates(items: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *items* with every present date claim converted.

    Names missing from *items* are not added.
    """
    result = dict(items)
    for name in DATE_CLAIMS:
        if name not in result:
            continue
        result[name] = to_instant(name, result[name])
        logger.debug("Normalised %s to %s", name, result[name].isoformat())
    return result
