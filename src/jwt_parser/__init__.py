"""JWT Parser — decode compact JWS tokens without signature verification."""

from .errors import (
    EncodingError,
    InvalidDateClaim,
    MalformedStructure,
    TokenParseError,
    UnsupportedEncryption,
)
from .parser import Parser, parse_token
from .token import Signature, Token

__version__ = "1.0.0"

__all__ = [
    "EncodingError",
    "InvalidDateClaim",
    "MalformedStructure",
    "Parser",
    "Signature",
    "Token",
    "TokenParseError",
    "UnsupportedEncryption",
    "parse_token",
]
