from .load_script import load_template, render_bulk_insert, render_load_script, write_load_script
from .report import RunReportWriter, build_table_record

__all__ = [
    "load_template",
    "render_bulk_insert",
    "render_load_script",
    "write_load_script",
    "RunReportWriter",
    "build_table_record",
]
