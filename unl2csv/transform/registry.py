from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple, Union

from ..config.model import AutoIncrementDefaultConfig, ConstantDefaultConfig, TableConfig
from .formatters import Formatter, get_formatter


DefaultGenerator = Callable[[], str]


@dataclass(frozen=True)
class ConstantDefault:
    value: str = ""

    def generator(self) -> DefaultGenerator:
        value = self.value
        return lambda: value


@dataclass(frozen=True)
class AutoIncrementDefault:
    start: int = 1

    def generator(self) -> DefaultGenerator:
        # every generator owns its counter, one per table transcoding
        counter = itertools.count(self.start)
        return lambda: str(next(counter))


DefaultValue = Union[ConstantDefault, AutoIncrementDefault]


def _frozen(mapping: Optional[Mapping] = None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class TableSchema:
    target_schema: Optional[str] = None
    column_order: Optional[Tuple[str, ...]] = None
    formatters: Mapping[str, Formatter] = field(default_factory=_frozen)
    defaults: Mapping[str, DefaultValue] = field(default_factory=_frozen)

    @property
    def explicit_order(self) -> bool:
        return self.column_order is not None

    def formatter_for(self, column: str) -> Optional[Formatter]:
        return self.formatters.get(column)

    def default_for(self, column: str) -> Optional[DefaultValue]:
        return self.defaults.get(column)


EMPTY_SCHEMA = TableSchema()


def _default_from_config(config: Union[ConstantDefaultConfig, AutoIncrementDefaultConfig]) -> DefaultValue:
    if isinstance(config, AutoIncrementDefaultConfig):
        return AutoIncrementDefault(start=config.start)
    return ConstantDefault(value=config.value)


def schema_from_config(config: TableConfig) -> TableSchema:
    return TableSchema(
        target_schema=config.target_schema,
        column_order=tuple(config.column_order) if config.column_order is not None else None,
        formatters=_frozen({column: get_formatter(name) for column, name in config.formatters.items()}),
        defaults=_frozen({column: _default_from_config(value) for column, value in config.defaults.items()}),
    )


class SchemaRegistry:
    """Read-only per-table catalog keyed by unqualified table name."""

    def __init__(self, schemas: Optional[Mapping[str, TableSchema]] = None) -> None:
        self._schemas: Mapping[str, TableSchema] = _frozen(schemas)

    @classmethod
    def from_config(cls, tables: Mapping[str, TableConfig]) -> "SchemaRegistry":
        return cls({name: schema_from_config(table) for name, table in tables.items()})

    def schema_for(self, table_name: str) -> TableSchema:
        return self._schemas.get(table_name, EMPTY_SCHEMA)

    def target_table_name(self, table_name_raw: str) -> str:
        table_name = table_name_raw.replace('"', "")
        unqualified = table_name.split(".", 1)[-1]
        schema = self.schema_for(unqualified)
        if schema.target_schema:
            return f"{schema.target_schema}.{unqualified}"
        return table_name
