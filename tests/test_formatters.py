import pytest

from unl2csv.transform.formatters import FORMATTERS, format_date, format_month_day


def test_format_date():
    assert format_date("01.02.2020") == "2020-02-01"
    assert format_date("31.12.1999") == "1999-12-31"


def test_format_date_blank_passes_through():
    assert format_date("") == ""
    assert format_date("   ") == "   "


def test_format_date_rejects_garbage():
    with pytest.raises(ValueError):
        format_date("2020-02-01")


def test_format_month_day():
    assert format_month_day("04-01") == "1970-04-01"
    assert format_month_day("02-29") == "1970-02-29"


def test_format_month_day_blank_passes_through():
    assert format_month_day(" ") == " "


def test_format_month_day_rejects_garbage():
    with pytest.raises(ValueError):
        format_month_day("13-01")
    with pytest.raises(ValueError):
        format_month_day("4-1")


def test_formatter_names():
    assert FORMATTERS["date"] is format_date
    assert FORMATTERS["month_day"] is format_month_day


def test_format_date_requires_padded_fields():
    for value in ["1.2.2020", "01.2.2020", "01.02.20", " 01.02.2020"]:
        with pytest.raises(ValueError):
            format_date(value)


def test_format_month_day_requires_padded_fields():
    for value in ["4-01", "04-1", "04/01"]:
        with pytest.raises(ValueError):
            format_month_day(value)
