from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

EPOCH_YEAR = 1970
# leap year used only to validate month-day values such as 02-29
_LEAP_YEAR = 2000

DAY_MONTH_YEAR = re.compile(r"\d{2}\.\d{2}\.\d{4}")
MONTH_DAY = re.compile(r"\d{2}-\d{2}")


def today(tz_name: str) -> date:
    tz = ZoneInfo(tz_name)
    return datetime.now(tz=tz).date()


def to_datestr(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_day_month_year(value: str) -> date:
    # strptime alone accepts unpadded values such as 1.2.2020
    if not DAY_MONTH_YEAR.fullmatch(value):
        raise ValueError(f"date value must be DD.MM.YYYY: {value!r}")
    return datetime.strptime(value, "%d.%m.%Y").date()


def parse_month_day(value: str) -> tuple[int, int]:
    if not MONTH_DAY.fullmatch(value):
        raise ValueError(f"month-day value must be MM-DD: {value!r}")
    parsed = datetime.strptime(f"{_LEAP_YEAR}-{value}", "%Y-%m-%d")
    return parsed.month, parsed.day
