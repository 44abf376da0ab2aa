from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


FORMATTER_NAMES = {"date", "month_day"}


class ProjectConfig(BaseModel):
    name: str = "unl2csv"
    timezone: str = "Europe/Berlin"
    log_dir: str = "logs"
    manifest_encoding: str = "utf-8"
    input_encoding: str = "cp850"
    output_encoding: str = "utf-16"
    script_encoding: str = "utf-8"
    delimiter: str = "|"
    unload_dir_suffix: str = ".exp"

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if len(value) != 1 or value in {"\\", "\n", '"'}:
            raise ValueError("delimiter must be a single character other than backslash, newline or quote")
        return value

    @field_validator("output_encoding")
    @classmethod
    def validate_output_encoding(cls, value: str) -> str:
        normalized = value.strip().lower().replace("_", "-")
        if not normalized.startswith("utf-16"):
            raise ValueError("output_encoding must be a UTF-16 variant")
        return normalized


class LoadScriptConfig(BaseModel):
    file_name: str = "import.mssql.sql"
    target_dir: str = "/var/opt/mssql/backups/init"
    post_load_template: Optional[str] = "sql/post_load.mssql.sql"


class ConstantDefaultConfig(BaseModel):
    kind: Literal["constant"] = "constant"
    value: str = ""


class AutoIncrementDefaultConfig(BaseModel):
    kind: Literal["auto_increment"]
    start: int = 1


DefaultConfig = Annotated[
    Union[ConstantDefaultConfig, AutoIncrementDefaultConfig],
    Field(discriminator="kind"),
]


class TableConfig(BaseModel):
    target_schema: Optional[str] = None
    column_order: Optional[List[str]] = None
    formatters: Dict[str, str] = Field(default_factory=dict)
    defaults: Dict[str, DefaultConfig] = Field(default_factory=dict)

    @field_validator("column_order")
    @classmethod
    def ensure_unique_columns(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        if not value:
            raise ValueError("column_order must not be empty")
        if len(value) != len(set(value)):
            raise ValueError("column_order must not repeat a column")
        return value

    @field_validator("formatters")
    @classmethod
    def validate_formatters(cls, value: Dict[str, str]) -> Dict[str, str]:
        invalid = {column: name for column, name in value.items() if name not in FORMATTER_NAMES}
        if invalid:
            raise ValueError(f"unknown formatters {invalid}, expected one of {sorted(FORMATTER_NAMES)}")
        return value


class MigrationConfig(BaseModel):
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    load_script: LoadScriptConfig = Field(default_factory=LoadScriptConfig)
    tables: Dict[str, TableConfig] = Field(default_factory=dict)

    @field_validator("tables", mode="before")
    @classmethod
    def allow_empty_tables(cls, value):
        # a bare "name:" entry in YAML parses as None
        if isinstance(value, dict):
            return {name: table if table is not None else {} for name, table in value.items()}
        return value
