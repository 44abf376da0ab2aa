from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from ..config.model import MigrationConfig
from ..extract.manifest import ManifestEntry, extract_declared_columns
from ..extract.reader import read_records
from ..extract.splitter import split_cells
from .registry import SchemaRegistry
from .transcoder import RowTranscoder


@dataclass
class TableResult:
    table_name: str
    target_table: str
    csv_name: str
    csv_path: Path
    rows: int


@dataclass
class TranscodeResult:
    tables: List[TableResult] = field(default_factory=list)

    @property
    def table_rows(self) -> dict:
        return {table.target_table: table.rows for table in self.tables}


def transcode_table(
    entry: ManifestEntry,
    manifest_text: str,
    registry: SchemaRegistry,
    unload_dir: Path,
    output_dir: Path,
    config: MigrationConfig,
    logger: logging.Logger,
) -> TableResult:
    project = config.project
    declared_columns = extract_declared_columns(manifest_text, entry.table_name_raw)
    target_table = registry.target_table_name(entry.table_name_raw)
    transcoder = RowTranscoder(
        table_name=entry.table_name,
        declared_columns=declared_columns,
        schema=registry.schema_for(entry.unqualified_name),
        delimiter=project.delimiter,
    )

    unload_path = unload_dir / entry.data_file_name
    csv_name = f"{target_table}.csv"
    csv_path = output_dir / csv_name
    logger.info("Processing %s for table %s", unload_path, target_table)

    rows = 0
    try:
        with csv_path.open("w", encoding=project.output_encoding, newline="") as handle:
            writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
            for record in read_records(unload_path, project.input_encoding, project.delimiter):
                writer.writerow(transcoder.transcode(split_cells(record, project.delimiter)))
                rows += 1
    except BaseException:
        # a partial CSV must never be picked up by the bulk load
        csv_path.unlink(missing_ok=True)
        raise

    logger.info("Wrote %s rows to %s", rows, csv_path)
    return TableResult(
        table_name=entry.table_name,
        target_table=target_table,
        csv_name=csv_name,
        csv_path=csv_path,
        rows=rows,
    )


def run_transcode(
    entries: List[ManifestEntry],
    manifest_text: str,
    registry: SchemaRegistry,
    unload_dir: Path,
    output_dir: Path,
    config: MigrationConfig,
    logger: logging.Logger,
    on_table: Optional[Callable[[TableResult], None]] = None,
) -> TranscodeResult:
    result = TranscodeResult()
    for entry in entries:
        table = transcode_table(entry, manifest_text, registry, unload_dir, output_dir, config, logger)
        result.tables.append(table)
        if on_table is not None:
            on_table(table)
    return result
