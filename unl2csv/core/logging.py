from __future__ import annotations

import logging
from pathlib import Path


LOGGER_NAME = "unl2csv"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _run_file_handler(logger: logging.Logger, log_path: Path) -> None:
    target = str(log_path.resolve())
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == target:
                return
            # one run log per process at a time
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(_FORMATTER)
    logger.addHandler(file_handler)


def setup_logging(log_dir: Path, run_id: str) -> logging.Logger:
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    has_stream = any(
        type(handler) is logging.StreamHandler for handler in logger.handlers
    )
    if not has_stream:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(_FORMATTER)
        logger.addHandler(stream_handler)

    _run_file_handler(logger, log_dir / f"run_{run_id}.log")
    return logger
