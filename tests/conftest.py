"""Shared token-building fixtures."""

import json

import pytest
from jwt.utils import base64url_encode


def _segment(data) -> str:
    """base64url-encode a JSON-able value (or raw bytes) without padding."""
    if isinstance(data, bytes):
        raw = data
    elif isinstance(data, str):
        raw = data.encode("utf-8")
    else:
        raw = json.dumps(data, separators=(",", ":")).encode("utf-8")
    return base64url_encode(raw).decode("ascii")


@pytest.fixture
def segment():
    return _segment


@pytest.fixture
def make_token():
    """Build a compact token string from header/claims and a signature."""

    def _make(header, claims, signature: bytes | str = b"") -> str:
        sig = signature if isinstance(signature, str) else _segment(signature) if signature else ""
        return f"{_segment(header)}.{_segment(claims)}.{sig}"

    return _make
