from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict

from .config.model import MigrationConfig
from .core.context import RunContext
from .core.errors import ManifestFormatError
from .extract.manifest import ManifestScan, read_manifest, scan_manifest
from .storage import RunReportWriter, build_table_record, load_template, write_load_script
from .transform.registry import SchemaRegistry
from .transform.runner import TableResult, run_transcode


@dataclass
class PipelineResult:
    database_name: str
    metrics: Dict


def scan_export(config: MigrationConfig, context: RunContext, logger: logging.Logger) -> tuple[str, ManifestScan]:
    manifest_text = read_manifest(context.manifest_path, config.project.manifest_encoding)
    scan = scan_manifest(manifest_text.splitlines(), logger)
    if not scan.database_name:
        raise ManifestFormatError(f"No database declaration in {context.manifest_path}")
    logger.info("Database name: %s", scan.database_name)
    logger.info("Found %s tables", len(scan.entries))
    return manifest_text, scan


def run_pipeline(config: MigrationConfig, context: RunContext, logger: logging.Logger) -> PipelineResult:
    metrics: Dict[str, dict] = {}
    try:
        start = time.time()
        manifest_text, scan = scan_export(config, context, logger)
        metrics["scan"] = {
            "seconds": time.time() - start,
            "tables": len(scan.entries),
        }

        post_load_sql = load_template(config.load_script.post_load_template)
        context.output_dir.mkdir(parents=True, exist_ok=True)
        registry = SchemaRegistry.from_config(config.tables)
        unload_dir = context.unload_dir(scan.database_name, config.project.unload_dir_suffix)
        report = RunReportWriter(context, database_name=scan.database_name)

        def record_table(table: TableResult) -> None:
            report.add_table(build_table_record(table.table_name, table.target_table, table.csv_path, table.rows))

        start = time.time()
        transcode_result = run_transcode(
            scan.entries,
            manifest_text,
            registry,
            unload_dir,
            context.output_dir,
            config,
            logger,
            on_table=record_table,
        )
        metrics["transcode"] = {
            "seconds": time.time() - start,
            "table_rows": transcode_result.table_rows,
        }

        start = time.time()
        script_path = write_load_script(
            context.output_dir / config.load_script.file_name,
            [(table.csv_name, table.target_table) for table in transcode_result.tables],
            config.load_script.target_dir,
            post_load_sql,
            config.project.script_encoding,
        )
        report.set_load_script(script_path)
        metrics["load_script"] = {
            "seconds": time.time() - start,
            "statements": len(transcode_result.tables),
        }
        logger.info("Load script written: %s", script_path)

        logger.info("Migration completed: %s", context.run_id)
        return PipelineResult(database_name=scan.database_name, metrics=metrics)
    except Exception as exc:
        logger.error("Migration failed: run_id=%s error=%s", context.run_id, exc)
        raise
