"""Tests for operand helpers and date normalization."""

from datetime import date, datetime, timedelta, timezone

import pytest

from glidequery.exceptions import QueryTypeError
from glidequery.utils import (
    is_array,
    is_date_like,
    is_number,
    is_scalar,
    normalize_operand,
    to_utc_query_format,
    type_label,
    validate_type,
)


class TestToUtcQueryFormat:
    """Date normalization is independent of the builder."""

    def test_utc_datetime(self):
        assert to_utc_query_format(datetime(2020, 1, 1, 12, 12, 12, tzinfo=timezone.utc)) == "2020-01-01 12:12:12"

    def test_offset_datetime(self, ist_datetime):
        assert to_utc_query_format(ist_datetime) == "2020-01-01 12:12:12"

    def test_negative_offset_crosses_day(self):
        value = datetime(2020, 12, 31, 22, 30, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert to_utc_query_format(value) == "2021-01-01 01:30:00"

    def test_microseconds_truncated(self):
        value = datetime(2020, 1, 1, 0, 0, 59, 999999, tzinfo=timezone.utc)
        assert to_utc_query_format(value) == "2020-01-01 00:00:59"

    def test_naive_datetime_is_utc(self):
        assert to_utc_query_format(datetime(2019, 7, 4, 8, 5, 3)) == "2019-07-04 08:05:03"

    def test_date_is_midnight(self):
        assert to_utc_query_format(date(2019, 7, 4)) == "2019-07-04 00:00:00"

    def test_same_instant_same_output(self):
        utc = datetime(2024, 2, 29, 6, 0, 0, tzinfo=timezone.utc)
        assert to_utc_query_format(utc) == to_utc_query_format(utc.astimezone(timezone(timedelta(hours=9))))

    @pytest.mark.parametrize(
        "value",
        [
            datetime.min.replace(tzinfo=timezone(timedelta(hours=5))),
            datetime.max.replace(tzinfo=timezone(timedelta(hours=-5))),
        ],
    )
    def test_out_of_range_aware_datetime(self, value):
        with pytest.raises(QueryTypeError, match="Date out of range"):
            to_utc_query_format(value)

    def test_rejects_non_date(self):
        with pytest.raises(QueryTypeError, match="Expected date type, found: string"):
            to_utc_query_format("2020-01-01")


class TestTypeChecks:
    def test_is_number(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_scalar(self):
        assert is_scalar("x")
        assert is_scalar(0)
        assert not is_scalar(None)
        assert not is_scalar([1])

    def test_is_array(self):
        assert is_array([1])
        assert is_array(())
        assert not is_array({1})
        assert not is_array("abc")

    def test_is_date_like(self):
        assert is_date_like(datetime(2020, 1, 1))
        assert is_date_like(date(2020, 1, 1))
        assert not is_date_like("2020-01-01")

    @pytest.mark.parametrize(
        "value,label",
        [
            ("x", "string"),
            (3, "number"),
            (3.0, "number"),
            (False, "boolean"),
            (None, "null"),
            ([], "list"),
            ((), "list"),
            (date(2020, 1, 1), "date"),
            ({}, "dict"),
        ],
    )
    def test_type_label(self, value, label):
        assert type_label(value) == label


class TestValidateType:
    def test_accepts_allowed(self):
        validate_type("x", ("string",))
        validate_type(1, ("string", "number"))

    def test_singular_message(self):
        with pytest.raises(QueryTypeError) as exc:
            validate_type(1, ("string",))
        assert exc.value.message == "Invalid type passed. Expected: string, found: number"
        assert exc.value.details == {"expected": "string", "found": "number"}

    def test_plural_message(self):
        with pytest.raises(QueryTypeError) as exc:
            validate_type(True, ("string", "number"))
        assert exc.value.message == "Invalid type passed. Expected one of: string, number, found: boolean"


class TestNormalizeOperand:
    def test_scalar(self):
        assert normalize_operand("abc", ("string",)) == "abc"
        assert normalize_operand(42, ("string", "number")) == "42"

    def test_array_joined_without_escaping(self):
        assert normalize_operand(["a b", "c,d", 3], ("string", "number")) == "a b,c,d,3"

    def test_array_element_rejected(self):
        with pytest.raises(QueryTypeError, match="found: list"):
            normalize_operand(["a", ["nested"]], ("string", "number"))
