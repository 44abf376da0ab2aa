from .manifest import ManifestEntry, ManifestScan, extract_declared_columns, read_manifest, scan_manifest
from .reader import iter_logical_lines, read_records
from .splitter import split_cells

__all__ = [
    "ManifestEntry",
    "ManifestScan",
    "extract_declared_columns",
    "read_manifest",
    "scan_manifest",
    "iter_logical_lines",
    "read_records",
    "split_cells",
]
