import pytest

from schoolbook.dates import Date, format_date, is_date_valid, is_leap_year, parse_date


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "date, expected",
    [
        (Date(29, 2, 2024), True),
        (Date(29, 2, 2023), False),
        (Date(28, 2, 2023), True),
        (Date(31, 4, 2001), False),
        (Date(30, 4, 2001), True),
        (Date(31, 12, 2100), True),
        (Date(1, 1, 1900), True),
        (Date(1, 1, 1899), False),
        (Date(1, 1, 2101), False),
        (Date(0, 5, 2000), False),
        (Date(32, 1, 2000), False),
        (Date(10, 13, 2000), False),
        (Date(10, 0, 2000), False),
    ],
)
def test_is_date_valid(date, expected):
    assert is_date_valid(date) is expected


def test_default_date_is_invalid():
    assert is_date_valid(Date()) is False


def test_parse_date_reads_fields():
    assert parse_date("05/03/2001") == Date(day=5, month=3, year=2001)


def test_parse_date_ignores_trailing_newline():
    assert parse_date("17/11/1999\n") == Date(17, 11, 1999)


def test_parse_date_accepts_unpadded_fields():
    assert parse_date("7/8/2010") == Date(7, 8, 2010)


@pytest.mark.parametrize("text", ["", "abc", "12-03-2000", "/03/2000"])
def test_parse_date_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_format_date_pads_with_zeros():
    assert format_date(Date(5, 3, 2001)) == "05/03/2001"


def test_str_uses_format():
    date = Date(1, 2, 2003)
    assert str(date) == format_date(date)


@pytest.mark.parametrize(
    "date", [Date(1, 1, 1900), Date(29, 2, 2024), Date(31, 12, 2100), Date(9, 9, 1999)]
)
def test_format_then_parse_round_trip(date):
    assert parse_date(format_date(date)) == date