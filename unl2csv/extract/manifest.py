from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.errors import ManifestFormatError


DATABASE_PATTERN = re.compile(r"^\{ DATABASE (\w+).*$")
TABLE_PATTERN = re.compile(r"^\{ TABLE ([\"\w.]+).*$")
UNLOAD_FILE_PATTERN = re.compile(r"^\{ unload file name = ([\"\w.]+).*$")


@dataclass(frozen=True)
class ManifestEntry:
    table_name_raw: str
    data_file_name: str

    @property
    def table_name(self) -> str:
        return self.table_name_raw.replace('"', "")

    @property
    def unqualified_name(self) -> str:
        return self.table_name.split(".", 1)[-1]


@dataclass
class ManifestScan:
    database_name: Optional[str] = None
    entries: List[ManifestEntry] = field(default_factory=list)


def read_manifest(path: Path, encoding: str = "utf-8") -> str:
    return path.read_text(encoding=encoding)


def scan_manifest(lines: Iterable[str], logger: Optional[logging.Logger] = None) -> ManifestScan:
    logger = logger or logging.getLogger("unl2csv")
    scan = ManifestScan()
    current_table: Optional[str] = None
    current_file: Optional[str] = None

    for line in lines:
        line = line.rstrip("\r\n")
        database_match = DATABASE_PATTERN.match(line)
        table_match = TABLE_PATTERN.match(line)
        file_match = UNLOAD_FILE_PATTERN.match(line)

        if database_match:
            if scan.database_name is None:
                scan.database_name = database_match.group(1)
        elif table_match:
            if current_table is not None:
                logger.warning(
                    "Table %s declared before the unload file of %s, pairing with the later table",
                    table_match.group(1),
                    current_table,
                )
            current_table = table_match.group(1)
        elif file_match:
            current_file = file_match.group(1)

        if current_table is not None and current_file is not None:
            scan.entries.append(ManifestEntry(table_name_raw=current_table, data_file_name=current_file))
            current_table = None
            current_file = None

    return scan


def extract_declared_columns(manifest_text: str, table_name_raw: str) -> List[str]:
    # create table "owner".name (col type, col type, ...);
    flat = re.sub(r"\r?\n", " ", manifest_text)
    marker = f"create table {table_name_raw} "
    start = flat.find(marker)
    if start < 0:
        raise ManifestFormatError(f"No create table clause for {table_name_raw}")
    body = flat[start + len(marker):]

    open_paren = body.find("(")
    if open_paren < 0:
        raise ManifestFormatError(f"Missing column list for {table_name_raw}")
    body = body[open_paren + 1:]

    close = body.find(");")
    if close < 0:
        raise ManifestFormatError(f"Unterminated column list for {table_name_raw}")
    body = body[:close]

    columns: List[str] = []
    for definition in body.split(", "):
        tokens = definition.strip().split()
        if not tokens:
            raise ManifestFormatError(f"Empty column definition for {table_name_raw}")
        columns.append(tokens[0])
    return columns
