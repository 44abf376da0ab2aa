from __future__ import annotations

import argparse
import os
from pathlib import Path

from dotenv import load_dotenv

from .config import ConfigError, load_config
from .core import MigrationError, RunContext, setup_logging
from .pipeline import run_pipeline, scan_export
from .utils.dates import today


DEFAULT_CONFIG = "config/config.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Informix dbexport to SQL Server bulk load converter")
    parser.add_argument("--config", default=os.getenv("UNL2CSV_CONFIG", DEFAULT_CONFIG))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("validate-config", help="Validate config file")

    scan = subparsers.add_parser("scan", help="List tables and unload files of an export")
    scan.add_argument("-i", "--input", required=True, help="dbexport manifest file path")

    run = subparsers.add_parser("run", help="Convert an export to CSV files and a load script")
    run.add_argument("-i", "--input", required=True, help="dbexport manifest file path")
    run.add_argument("-o", "--output", required=True, help="output directory")
    return parser


def main() -> None:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}")

    if args.command == "validate-config":
        print(f"Config OK: {config.project.name} ({len(config.tables)} tables)")
        return

    manifest_path = Path(args.input)
    output_dir = Path(getattr(args, "output", None) or ".")
    context = RunContext.create(today(config.project.timezone), manifest_path, output_dir, Path(config.project.log_dir))
    logger = setup_logging(context.log_dir, context.run_id)
    logger.info("Input file path: %s", manifest_path)

    if args.command == "scan":
        try:
            _, scan = scan_export(config, context, logger)
        except (MigrationError, OSError) as exc:
            logger.error("%s", exc)
            raise SystemExit(2)
        for entry in scan.entries:
            logger.info("%s -> %s", entry.table_name, entry.data_file_name)
        return

    if args.command == "run":
        logger.info("Output path: %s", output_dir)
        try:
            run_pipeline(config, context, logger)
        except (MigrationError, OSError):
            # already logged by the pipeline
            raise SystemExit(2)
        return

    raise SystemExit(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
