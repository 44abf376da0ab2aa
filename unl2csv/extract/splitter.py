from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Pattern


@lru_cache(maxsize=8)
def _separator(delimiter: str) -> Pattern[str]:
    return re.compile(r"(?<!\\)" + re.escape(delimiter))


def split_cells(line: str, delimiter: str = "|") -> List[str]:
    """Split a record on unescaped delimiters.

    Escaped delimiters stay in the cell as ``\\|``; the empty cell after the
    record's final delimiter is kept.
    """
    return _separator(delimiter).split(line)
