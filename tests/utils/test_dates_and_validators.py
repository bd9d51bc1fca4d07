"""Tests for deadline parsing and CLI input validators."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from taskvault.exceptions import ValidationError
from taskvault.utils.dates import is_past, now_like, parse_deadline
from taskvault.utils.validators import (
    validate_email,
    validate_future_deadline,
    validate_password,
)


class TestParseDeadline:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2030-01-31", datetime(2030, 1, 31)),
            ("2030-01-31T09:30", datetime(2030, 1, 31, 9, 30)),
            (" 2030-01-31 09:30:15 ", datetime(2030, 1, 31, 9, 30, 15)),
        ],
    )
    def test_iso_strings(self, raw, expected):
        assert parse_deadline(raw) == expected

    def test_offset_is_kept(self):
        parsed = parse_deadline("2030-01-31T09:30:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_date_object_means_midnight(self):
        assert parse_deadline(date(2030, 1, 31)) == datetime(2030, 1, 31)

    def test_datetime_passes_through(self):
        dt = datetime(2030, 1, 31, 8)
        assert parse_deadline(dt) is dt

    @pytest.mark.parametrize("raw", ["not-a-date", "2030-13-01", "31/01/2030", 12345])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError):
            parse_deadline(raw)


class TestIsPast:
    def test_naive(self):
        now = datetime(2030, 1, 1, 12)
        assert is_past(datetime(2030, 1, 1, 11), now) is True
        assert is_past(datetime(2030, 1, 1, 13), now) is False

    def test_aware_uses_matching_clock(self):
        moment = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert now_like(moment).tzinfo is timezone.utc
        assert is_past(moment) is True


class TestValidators:
    def test_valid_email(self):
        assert validate_email("ada@lovelace.org") == "ada@lovelace.org"

    @pytest.mark.parametrize("email", ["ada", "ada@", "@lovelace.org", "a b@c.org"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="valid email"):
            validate_email(email)

    def test_password_length(self):
        assert validate_password("123456") == "123456"
        with pytest.raises(ValidationError, match="at least 6"):
            validate_password("12345")

    def test_future_deadline(self):
        now = datetime(2030, 1, 1)
        assert validate_future_deadline("2030-01-02", now) == datetime(2030, 1, 2)
        with pytest.raises(ValidationError, match="past"):
            validate_future_deadline("2029-12-31", now)
