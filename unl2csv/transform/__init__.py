from .formatters import FORMATTERS, format_date, format_month_day
from .registry import AutoIncrementDefault, ConstantDefault, SchemaRegistry, TableSchema
from .runner import TableResult, TranscodeResult, run_transcode, transcode_table
from .transcoder import RowTranscoder, escape_delimiter, unescape_delimiter

__all__ = [
    "FORMATTERS",
    "format_date",
    "format_month_day",
    "AutoIncrementDefault",
    "ConstantDefault",
    "SchemaRegistry",
    "TableSchema",
    "TableResult",
    "TranscodeResult",
    "run_transcode",
    "transcode_table",
    "RowTranscoder",
    "escape_delimiter",
    "unescape_delimiter",
]
