"""
Segment decoding primitives.

Wraps PyJWT's base64url helper and the standard JSON decoder behind a
small :class:`Decoder` collaborator so the parser can be handed a
different implementation in tests.  Every failure surfaces as
:class:`~jwt_parser.errors.EncodingError` with the original exception
chained.
"""

from __future__ import annotations

import json
import logging
import re

from jwt.utils import base64url_decode

from .errors import EncodingError

__all__ = ["Decoder"]

logger = logging.getLogger(__name__)

# URL-safe alphabet; trailing padding is tolerated but not required.
_BASE64URL_RE = re.compile(r"[A-Za-z0-9_\-]*={0,2}")


def _reject_constant(name: str) -> None:
    """Refuse the non-standard ``NaN`` / ``Infinity`` literals json accepts."""
    raise ValueError(f"Non-standard JSON constant {name!r} is not allowed")


class Decoder:
    """Decodes base64url text and JSON documents for the parser."""

    def base64url_decode(self, data: str) -> bytes:
        """Decode a base64url string (with or without padding) into bytes.

        Raises:
            EncodingError: If *data* contains characters outside the
                base64url alphabet or has an impossible length.
        """
        if not _BASE64URL_RE.fullmatch(data):
            raise EncodingError(f"Invalid base64url characters in segment: {data[:32]!r}")
        try:
            return base64url_decode(data)
        except ValueError as exc:
            raise EncodingError(f"Could not base64url-decode segment: {exc}") from exc

    def json_decode(self, data: bytes | str) -> object:
        """Decode a UTF-8 JSON document.

        Raises:
            EncodingError: On invalid UTF-8, malformed JSON, ``NaN`` /
                ``Infinity`` literals, or nesting too deep to decode.
        """
        try:
            text = data.decode("utf-8") if isinstance(data, bytes) else data
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise EncodingError(f"Could not JSON-decode segment: {exc}") from exc
