"""
Immutable result of a parse: headers, claims, signature and raw segments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from jwt.utils import base64url_encode

__all__ = ["Signature", "Token"]

_MISSING = object()


@dataclass(frozen=True)
class Signature:
    """Raw signature bytes, exactly as found in the token (unverified)."""

    hash: bytes

    def __str__(self) -> str:
        return base64url_encode(self.hash).decode("ascii")

    def hex(self) -> str:
        return self.hash.hex()


@dataclass(frozen=True)
class Token:
    """A parsed JWS token.

    ``raw_segments`` holds the original header and claims segments, plus
    the signature segment when a signature is present.  Verification
    collaborators sign over :attr:`payload`.
    """

    headers: Mapping[str, Any]
    claims: Mapping[str, Any]
    signature: Signature | None = None
    raw_segments: tuple[str, ...] = field(default_factory=tuple)

    # Header and claim views are mappings, so tokens are not hashable
    __hash__ = None

    def __post_init__(self) -> None:
        # Read-only views over private copies
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(self, "claims", MappingProxyType(dict(self.claims)))
        object.__setattr__(self, "raw_segments", tuple(self.raw_segments))

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def get_header(self, name: str, default: Any = _MISSING) -> Any:
        """Return header *name*, or *default* when given and the header is absent.

        Raises:
            KeyError: If the header is absent and no default was given.
        """
        if name in self.headers:
            return self.headers[name]
        if default is _MISSING:
            raise KeyError(f"Requested header is not configured: {name!r}")
        return default

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    def has_claim(self, name: str) -> bool:
        return name in self.claims

    def get_claim(self, name: str, default: Any = _MISSING) -> Any:
        """Return claim *name*, or *default* when given and the claim is absent.

        Raises:
            KeyError: If the claim is absent and no default was given.
        """
        if name in self.claims:
            return self.claims[name]
        if default is _MISSING:
            raise KeyError(f"Requested claim is not configured: {name!r}")
        return default

    # ------------------------------------------------------------------
    # Raw form
    # ------------------------------------------------------------------

    @property
    def is_signed(self) -> bool:
        return self.signature is not None

    @property
    def payload(self) -> str:
        """The ``header.claims`` signing input."""
        return ".".join(self.raw_segments[:2])

    def __str__(self) -> str:
        if self.signature is None:
            return self.payload + "."
        return ".".join(self.raw_segments)
