"""
Core JWT parsing logic.

Turns a compact JWS string into a :class:`~jwt_parser.token.Token`
without verifying the signature.  The pipeline is:

    split -> decode header -> decode claims -> normalise dates
          -> merge claims over header -> extract signature -> assemble

Every step either succeeds or raises one of the exceptions in
:mod:`jwt_parser.errors`; there is no partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .claims import normalize_dates
from .decoder import Decoder
from .errors import MalformedStructure, UnsupportedEncryption
from .token import Signature, Token

__all__ = ["Parser", "merge_headers", "parse_token"]

logger = logging.getLogger(__name__)


def merge_headers(headers: Mapping[str, Any], claims: Mapping[str, Any]) -> dict[str, Any]:
    """Return *headers* with every key also present in *claims* replaced by the claim value.

    Keys that only exist in *claims* are not copied into the result.
    """
    return {
        name: claims[name] if name in claims else value
        for name, value in headers.items()
    }


class Parser:
    """Parses compact JWT strings into tokens.

    Instances hold no per-call state and can be shared between threads.

    Args:
        decoder: base64url/JSON collaborator; defaults to :class:`Decoder`.
        max_length: Reject tokens longer than this many characters.
            ``None`` or ``0`` disables the check.
    """

    def __init__(self, decoder: Decoder | None = None, max_length: int | None = None) -> None:
        self.decoder = decoder or Decoder()
        self.max_length = max_length or None

    def parse(self, jwt: Any) -> Token:
        """Parse *jwt* and return the assembled token.

        Raises:
            MalformedStructure: Not a string, wrong number of segments,
                or longer than ``max_length``.
            EncodingError: A segment is not valid base64url or JSON, or a
                date claim cannot be read as a timestamp.
            UnsupportedEncryption: The header declares ``enc``.
        """
        segments = self._split(jwt)
        headers = self._parse_header(segments[0])
        claims = self._parse_claims(segments[1])

        headers = merge_headers(headers, claims)
        signature = self._parse_signature(headers, segments[2])

        if signature is None:
            segments = segments[:2]

        logger.debug(
            "Parsed token: %d header(s), %d claim(s), signed=%s",
            len(headers), len(claims), signature is not None,
        )
        return Token(headers=headers, claims=claims, signature=signature, raw_segments=segments)

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _split(self, jwt: Any) -> tuple[str, ...]:
        if not isinstance(jwt, str):
            raise MalformedStructure.not_a_string(jwt)

        if self.max_length is not None and len(jwt) > self.max_length:
            raise MalformedStructure.too_long(len(jwt), self.max_length)

        segments = tuple(jwt.split("."))
        if len(segments) != 3:
            raise MalformedStructure.missing_or_not_enough_separators()

        logger.debug("Segment lengths: %s", [len(s) for s in segments])
        return segments

    def _decode_mapping(self, segment: str, label: str) -> dict[str, Any]:
        """base64url + JSON decode *segment*; non-object JSON yields an empty mapping."""
        data = self.decoder.json_decode(self.decoder.base64url_decode(segment))
        if not isinstance(data, dict):
            logger.warning(
                "Token %s is a JSON %s, not an object; treating it as empty",
                label, type(data).__name__,
            )
            return {}
        return data

    def _parse_header(self, segment: str) -> dict[str, Any]:
        headers = self._decode_mapping(segment, "header")

        if headers.get("enc") is not None:
            raise UnsupportedEncryption.encryption()

        return normalize_dates(headers)

    def _parse_claims(self, segment: str) -> dict[str, Any]:
        return normalize_dates(self._decode_mapping(segment, "claims"))

    def _parse_signature(self, headers: Mapping[str, Any], segment: str) -> Signature | None:
        alg = headers.get("alg")
        if segment == "" or alg is None or alg == "" or alg == "none":
            return None

        return Signature(self.decoder.base64url_decode(segment))


def parse_token(jwt: Any, decoder: Decoder | None = None, max_length: int | None = None) -> Token:
    """Parse *jwt* with a one-off :class:`Parser`."""
    return Parser(decoder=decoder, max_length=max_length).parse(jwt)
