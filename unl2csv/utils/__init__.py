from .dates import EPOCH_YEAR, parse_day_month_year, parse_month_day, today, to_datestr

__all__ = [
    "EPOCH_YEAR",
    "parse_day_month_year",
    "parse_month_day",
    "today",
    "to_datestr",
]
