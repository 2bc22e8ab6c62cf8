"""
Exception hierarchy for token parsing.

Every failure raised by :class:`~jwt_parser.parser.Parser` derives from
:class:`TokenParseError`, so callers can catch the whole family at once
or pick out the specific cause.
"""

from __future__ import annotations

__all__ = [
    "TokenParseError",
    "MalformedStructure",
    "EncodingError",
    "InvalidDateClaim",
    "UnsupportedEncryption",
]


class TokenParseError(Exception):
    """Base class for all token parsing failures."""


class MalformedStructure(TokenParseError):
    """Raised when the input is not a string of three dot-separated segments."""

    @classmethod
    def missing_or_not_enough_separators(cls) -> "MalformedStructure":
        return cls("The JWT string must have two dots (missing or not enough separators).")

    @classmethod
    def not_a_string(cls, value: object) -> "MalformedStructure":
        return cls(f"The JWT must be a string, got {type(value).__name__}.")

    @classmethod
    def too_long(cls, length: int, limit: int) -> "MalformedStructure":
        return cls(f"The JWT is {length} characters long, exceeding the limit of {limit}.")


class EncodingError(TokenParseError):
    """Raised when a segment is not valid base64url or not valid JSON."""


class InvalidDateClaim(EncodingError):
    """Raised when a date claim (iat, nbf, exp) cannot be read as Unix seconds."""


class UnsupportedEncryption(TokenParseError):
    """Raised when the header declares ``enc``; encrypted tokens (JWE) are not supported."""

    @classmethod
    def encryption(cls) -> "UnsupportedEncryption":
        return cls("Encryption is not supported yet (header contains 'enc').")
