from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from ..core.errors import TruncatedRecordError


CONTINUATION = "\\"


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def iter_logical_lines(lines: Iterable[str], delimiter: str = "|") -> Iterator[str]:
    """Join backslash-continued physical lines into logical records.

    A trailing carriage return stands in for the final delimiter of a record
    and is replaced by it.
    """
    physical = iter(lines)
    line_no = 0
    for raw in physical:
        line_no += 1
        start_no = line_no
        line = _strip_newline(raw)
        while line.endswith(CONTINUATION):
            try:
                following = next(physical)
            except StopIteration:
                raise TruncatedRecordError(
                    f"Record starting at line {start_no} ends with a line continuation at end of file"
                ) from None
            line_no += 1
            line = line[:-1] + "\n" + _strip_newline(following)
        if line.endswith("\r"):
            line = line[:-1] + delimiter
        yield line


def read_records(path: Path, encoding: str = "cp850", delimiter: str = "|") -> Iterator[str]:
    # only LF ends a physical line, a CR before it belongs to the record
    with path.open("r", encoding=encoding, newline="\n") as handle:
        yield from iter_logical_lines(handle, delimiter)
