from __future__ import annotations


class MigrationError(RuntimeError):
    pass


class ManifestFormatError(MigrationError):
    pass


class UndeclaredColumnError(MigrationError):
    pass


class TruncatedRecordError(MigrationError):
    pass


class RecordShapeError(MigrationError):
    pass


class CellFormatError(MigrationError):
    pass
