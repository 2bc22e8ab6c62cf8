"""Date normalisation tests — explicit Unix-seconds coercion contract."""

from datetime import datetime, timedelta, timezone

import pytest

from jwt_parser.claims import DATE_CLAIMS, EPOCH, RegisteredClaims, normalize_dates, to_instant
from jwt_parser.errors import EncodingError, InvalidDateClaim


def test_date_claim_registry():
    assert DATE_CLAIMS == ("iat", "nbf", "exp")
    assert set(DATE_CLAIMS) <= set(RegisteredClaims.ALL)


def test_epoch_is_utc():
    assert EPOCH == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value, seconds", [
    (1500000000, 1500000000),
    (0, 0),
    (-86400, -86400),
    (1500000000.9, 1500000000),
    (-1.5, -1),
    (True, 1),
    (False, 0),
    (None, 0),
    ("1500000000", 1500000000),
    ("  42 ", 42),
    ("+7", 7),
    ("1.5e9", 1500000000),
    ("12.75", 12),
])
def test_to_instant_coercion(value, seconds):
    assert to_instant("iat", value) == EPOCH + timedelta(seconds=seconds)


@pytest.mark.parametrize("value", [
    "abc",
    "",
    "nan",
    "inf",
    "1_000",
    "12abc",
    "١٥٠٠",          # non-ASCII digits
    "١٥.٠",
    float("nan"),
    float("inf"),
    [1500000000],
    {"at": 1},
    10 ** 20,
    300000000000,
    "1e400",
])
def test_to_instant_rejects(value):
    with pytest.raises(InvalidDateClaim):
        to_instant("exp", value)


def test_invalid_date_claim_is_encoding_error():
    with pytest.raises(EncodingError):
        to_instant("nbf", "soon")


def test_instant_is_timezone_aware():
    instant = to_instant("iat", 1500000000)
    assert instant.tzinfo is not None
    assert instant.isoformat() == "2017-07-14T02:40:00+00:00"


class TestNormalizeDates:
    def test_converts_present_date_claims(self):
        result = normalize_dates({"iat": 1, "nbf": 2, "exp": 3})
        assert result == {
            "iat": EPOCH + timedelta(seconds=1),
            "nbf": EPOCH + timedelta(seconds=2),
            "exp": EPOCH + timedelta(seconds=3),
        }

    def test_never_adds_missing_claims(self):
        assert normalize_dates({"sub": "alice"}) == {"sub": "alice"}
        assert normalize_dates({}) == {}

    def test_leaves_other_values_untouched(self):
        items = {"iat": 10, "auth_time": 20, "nested": {"exp": 30}}
        result = normalize_dates(items)
        assert result["auth_time"] == 20
        assert result["nested"] == {"exp": 30}

    def test_does_not_mutate_input(self):
        items = {"exp": 100}
        normalize_dates(items)
        assert items == {"exp": 100}
