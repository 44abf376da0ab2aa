from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..core.errors import CellFormatError, RecordShapeError, UndeclaredColumnError
from .registry import DefaultGenerator, TableSchema


ESCAPE = "\\"


def unescape_delimiter(cell: str, delimiter: str = "|") -> str:
    return cell.replace(ESCAPE + delimiter, delimiter)


def escape_delimiter(cell: str, delimiter: str = "|") -> str:
    return cell.replace(delimiter, ESCAPE + delimiter)


class RowTranscoder:
    """Turns split unload records of one table into CSV row values.

    With an explicit column order every output column is either taken from
    its declared position in the record or produced by the column's default
    generator. Without one, every real cell is emitted in source order and the
    empty sentinel cell after the last delimiter is dropped.

    Default generators are created per transcoder, so an auto-increment
    sequence covers exactly the rows of one table in output order.
    """

    def __init__(
        self,
        table_name: str,
        declared_columns: Sequence[str],
        schema: TableSchema,
        delimiter: str = "|",
    ) -> None:
        self.table_name = table_name
        self.declared_columns: Tuple[str, ...] = tuple(declared_columns)
        self.schema = schema
        self.delimiter = delimiter
        self._generators: Dict[str, DefaultGenerator] = {}
        self._plan: Optional[List[Tuple[str, Optional[int]]]] = None
        if schema.explicit_order:
            self._plan = self._build_plan(schema.column_order)

    def _build_plan(self, column_order: Sequence[str]) -> List[Tuple[str, Optional[int]]]:
        positions = {column: idx for idx, column in reversed(list(enumerate(self.declared_columns)))}
        plan: List[Tuple[str, Optional[int]]] = []
        for column in column_order:
            idx = positions.get(column)
            if idx is None:
                default = self.schema.default_for(column)
                if default is None:
                    raise UndeclaredColumnError(
                        f"Column {column} of {self.table_name} is neither declared in the export nor defaulted"
                    )
                self._generators[column] = default.generator()
            plan.append((column, idx))
        return plan

    def _format_cell(self, column: Optional[str], raw: str) -> str:
        value = raw
        formatter = self.schema.formatter_for(column) if column is not None else None
        if formatter is not None:
            try:
                value = formatter(value)
            except ValueError as exc:
                raise CellFormatError(f"Cannot format {self.table_name}.{column} value {raw!r}: {exc}") from exc
        return unescape_delimiter(value, self.delimiter)

    def transcode(self, cells: Sequence[str]) -> List[str]:
        if self._plan is None:
            return [
                self._format_cell(self._declared_name(idx), cells[idx])
                for idx in range(len(cells) - 1)
            ]

        row: List[str] = []
        for column, idx in self._plan:
            if idx is None:
                raw = self._generators[column]()
            elif idx < len(cells):
                raw = cells[idx]
            else:
                raise RecordShapeError(
                    f"Record of {self.table_name} has {len(cells)} cells, column {column} is at position {idx + 1}"
                )
            row.append(self._format_cell(column, raw))
        return row

    def _declared_name(self, idx: int) -> Optional[str]:
        if idx < len(self.declared_columns):
            return self.declared_columns[idx]
        return None
