"""Unit tests for date conversion between display and wire formats."""

from datetime import date, timedelta

import pytest

from user_directory.application.formatting import (
    WIRE_FORMAT_ISO,
    DateFormatter,
    format_date_label,
    is_ambiguous,
    mask_date_input,
    parse_display_date,
)
from user_directory.domain.exceptions import FormatError


@pytest.fixture
def mdy() -> DateFormatter:
    return DateFormatter()


@pytest.fixture
def iso() -> DateFormatter:
    return DateFormatter(WIRE_FORMAT_ISO)


def test_to_wire_swaps_day_and_month(mdy: DateFormatter):
    assert mdy.to_wire("15/06/1990") == "06/15/1990"


def test_to_wire_iso(iso: DateFormatter):
    assert iso.to_wire("15/06/1990") == "1990-06-15"


def test_to_display_from_mdy(mdy: DateFormatter):
    assert mdy.to_display("06/15/1990") == "15/06/1990"


def test_to_display_from_iso_date_and_datetime(mdy: DateFormatter):
    assert mdy.to_display("1990-06-15") == "15/06/1990"
    assert mdy.to_display("1990-06-15T00:00:00.000Z") == "15/06/1990"


@pytest.mark.parametrize("formatter", [DateFormatter(), DateFormatter(WIRE_FORMAT_ISO)])
def test_round_trip_every_day_of_a_leap_year(formatter: DateFormatter):
    day = date(2020, 1, 1)
    while day.year == 2020:
        display = f"{day.day:02d}/{day.month:02d}/{day.year}"
        assert formatter.to_display(formatter.to_wire(display)) == display
        day += timedelta(days=1)


@pytest.mark.parametrize("display", ["01/01/0001", "29/02/2000", "31/12/9999", "05/06/1990"])
def test_round_trip_edge_dates(mdy: DateFormatter, display: str):
    assert mdy.to_display(mdy.to_wire(display)) == display


@pytest.mark.parametrize("value", ["31/02/2020", "13/13/2020", "29/02/2019", "31/04/2021"])
def test_to_wire_rejects_impossible_dates(mdy: DateFormatter, value: str):
    with pytest.raises(FormatError):
        mdy.to_wire(value)


@pytest.mark.parametrize("value", ["31/02/2020", "13/13/2020", "2020-02-30", "15-06-1990", "06/15/1990\n", ""])
def test_to_display_rejects_malformed_dates(mdy: DateFormatter, value: str):
    with pytest.raises(FormatError):
        mdy.to_display(value)


@pytest.mark.parametrize("value", ["1/6/1990", "15/06/90", "15.06.1990", "15/06/1990\n", "abc", ""])
def test_to_wire_rejects_bad_shapes(mdy: DateFormatter, value: str):
    with pytest.raises(FormatError):
        mdy.to_wire(value)


def test_to_wire_keeps_value_already_in_wire_form(mdy: DateFormatter):
    # Month position 15 cannot be DD/MM, so it is taken as MM/DD already
    assert mdy.to_wire("06/15/1990") == "06/15/1990"


def test_to_wire_reads_ambiguous_dates_as_display(mdy: DateFormatter):
    assert mdy.to_wire("05/06/1990") == "06/05/1990"


def test_to_display_keeps_value_already_in_display_form(mdy: DateFormatter):
    assert mdy.to_display("15/06/1990") == "15/06/1990"


def test_iso_formatter_accepts_iso_input(iso: DateFormatter):
    assert iso.to_wire("1990-06-15") == "1990-06-15"


def test_unsupported_wire_format():
    with pytest.raises(ValueError):
        DateFormatter("DD-MM-YYYY")


def test_is_ambiguous():
    assert is_ambiguous("05/06/1990")
    assert not is_ambiguous("05/05/1990")
    assert not is_ambiguous("15/06/1990")
    assert not is_ambiguous("1990-06-05")


def test_parse_display_date():
    assert parse_display_date("29/02/2024") == date(2024, 2, 29)
    with pytest.raises(FormatError):
        parse_display_date("29/02/2023")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", "1"),
        ("15", "15"),
        ("150", "15/0"),
        ("1506", "15/06"),
        ("15061", "15/06/1"),
        ("15061990", "15/06/1990"),
        ("15/06/19901", "15/06/1990"),
        ("15a06b1990", "15/06/1990"),
        ("", ""),
    ],
)
def test_mask_date_input(raw: str, expected: str):
    assert mask_date_input(raw) == expected


def test_format_date_label():
    assert format_date_label("15/06/1990") == "Jun 15, 1990"
    assert format_date_label("01/12/2001") == "Dec 1, 2001"
    assert format_date_label("not a date") == "not a date"
