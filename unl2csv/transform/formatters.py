from __future__ import annotations

from typing import Callable, Dict

from ..utils.dates import EPOCH_YEAR, parse_day_month_year, parse_month_day, to_datestr


Formatter = Callable[[str], str]


def format_date(value: str) -> str:
    """dd.mm.yyyy -> yyyy-mm-dd; blank values pass through."""
    if not value.strip():
        return value
    return to_datestr(parse_day_month_year(value))


def format_month_day(value: str) -> str:
    """mm-dd -> 1970-mm-dd for recurring dates such as fiscal year bounds."""
    if not value.strip():
        return value
    month, day = parse_month_day(value)
    return f"{EPOCH_YEAR:04d}-{month:02d}-{day:02d}"


FORMATTERS: Dict[str, Formatter] = {
    "date": format_date,
    "month_day": format_month_day,
}


def get_formatter(name: str) -> Formatter:
    try:
        return FORMATTERS[name]
    except KeyError:
        raise ValueError(f"Unknown formatter: {name}") from None
