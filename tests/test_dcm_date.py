from datetime import date, datetime, timezone

import pytest

from dicomkit.dcm_date import Date, extract_date, parse_date
from dicomkit.precision import DateParseError, Precision

UTC = timezone.utc


@pytest.mark.parametrize(
    "value, expected_string, expected, expected_precision",
    [
        ("20200304", "2020-03-04", datetime(2020, 3, 4, tzinfo=UTC), Precision.FULL),
        ("202003", "2020-03", datetime(2020, 3, 1, tzinfo=UTC), Precision.MONTH),
        ("2020", "2020", datetime(2020, 1, 1, tzinfo=UTC), Precision.YEAR),
        ("2020.03.04", "2020-03-04", datetime(2020, 3, 4, tzinfo=UTC), Precision.FULL),
        ("2020.03", "2020-03", datetime(2020, 3, 1, tzinfo=UTC), Precision.MONTH),
    ],
)
def test_parse_date(value, expected_string, expected, expected_precision):
    parsed = parse_date(value)
    assert parsed.time == expected
    assert parsed.precision is expected_precision
    assert str(parsed) == expected_string
    assert parsed.dcm() == value


@pytest.mark.parametrize("bad", ["101002034", "1010023", "10102", "101"])
def test_parse_date_errors(bad):
    with pytest.raises(DateParseError):
        parse_date(bad)


@pytest.mark.parametrize(
    "precision, expected",
    [
        (Precision.FULL, "10100203"),
        (Precision.DAY, "10100203"),
        (Precision.MONTH, "101002"),
        (Precision.YEAR, "1010"),
    ],
)
def test_date_dcm_trimming(precision, expected):
    value = Date(time=datetime(1010, 2, 3, 5, 6, 7, tzinfo=UTC), precision=precision)
    assert value.dcm() == expected


def test_date_sane_defaults():
    assert Date(time=datetime(2021, 3, 16, tzinfo=UTC)).dcm() == "20210316"


def test_example_parse_date():
    parsed = parse_date("20201210")
    assert parsed.time == datetime(2020, 12, 10, tzinfo=UTC)
    assert str(parsed.precision) == "FULL"


def test_example_parse_date_less_precision():
    parsed = parse_date("202012")
    assert parsed.time.month == 12
    assert str(parsed.precision) == "MONTH"
    assert parsed.is_nema is False


def test_example_parse_date_nema():
    parsed = parse_date("2020.12.10")
    assert parsed.time == datetime(2020, 12, 10, tzinfo=UTC)
    assert str(parsed.precision) == "FULL"
    assert parsed.is_nema is True


def test_example_date_create():
    value = Date(time=datetime(2006, 1, 2, tzinfo=UTC), precision=Precision.FULL)
    assert value.dcm() == "20060102"
    assert str(value) == "2006-01-02"


def test_example_date_create_nema300():
    value = Date(time=datetime(2006, 1, 2, tzinfo=UTC), precision=Precision.FULL, is_nema=True)
    assert value.dcm() == "2006.01.02"
    assert str(value) == "2006-01-02"


def test_example_date_precision_month():
    value = Date(time=datetime(2006, 1, 1, tzinfo=UTC), precision=Precision.MONTH)
    assert value.dcm() == "200601"
    assert str(value) == "2006-01"


def test_plain_date_object_is_accepted():
    assert Date(time=date(2021, 3, 16)).dcm() == "20210316"


def test_extract_date_dt_layout():
    matches = ["1010020304", "1010", "02", "03", "04", "", "", "", "", "", "", "", ""]
    year, month, day, precision = extract_date(matches, Precision.FULL, False)
    assert (year.value, month.value, day.value) == (1010, 2, 3)
    assert precision is Precision.DAY


def test_extract_date_da_full_precision():
    _, _, _, precision = extract_date(["20200304", "2020", "03", "04"], Precision.FULL, True)
    assert precision is Precision.FULL


def test_extract_date_missing_groups_default_to_one():
    _, month, day, precision = extract_date(["1010", "1010", "", ""], Precision.FULL, True)
    assert (month.value, day.value) == (1, 1)
    assert precision is Precision.YEAR


def test_extract_date_not_enough_matches():
    with pytest.raises(ValueError):
        extract_date(["2020", "2020"], Precision.FULL, True)


@pytest.mark.parametrize("value", ["20200304", "202003", "2020", "2020.03.04", "2020.03"])
def test_dcm_round_trip(value):
    assert parse_date(parse_date(value).dcm()) == parse_date(value)