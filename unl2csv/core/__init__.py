from .context import RunContext
from .errors import (
    CellFormatError,
    ManifestFormatError,
    MigrationError,
    RecordShapeError,
    TruncatedRecordError,
    UndeclaredColumnError,
)
from .logging import setup_logging

__all__ = [
    "RunContext",
    "setup_logging",
    "MigrationError",
    "ManifestFormatError",
    "UndeclaredColumnError",
    "TruncatedRecordError",
    "RecordShapeError",
    "CellFormatError",
]
