from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..core.context import RunContext


def _digest(path: Path) -> Tuple[int, str]:
    digest = hashlib.sha256()
    size = 0
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
            size += len(chunk)
    return size, digest.hexdigest()


def build_table_record(table_name: str, target_table: str, csv_path: Path, rows: int) -> dict:
    size, sha256 = _digest(csv_path)
    return {
        "table": table_name,
        "target_table": target_table,
        "csv_path": str(csv_path),
        "rows": rows,
        "file_size": size,
        "sha256": sha256,
    }


@dataclass
class RunReportWriter:
    context: RunContext
    database_name: Optional[str] = None
    tables: List[Dict[str, Any]] = field(default_factory=list)
    load_script: Optional[str] = None

    @property
    def report_path(self) -> Path:
        return self.context.report_dir / f"{self.context.run_id}.json"

    def add_table(self, entry: Dict[str, Any]) -> None:
        self.tables.append(entry)
        self.save()

    def set_load_script(self, path: Path) -> None:
        self.load_script = str(path)
        self.save()

    def save(self) -> None:
        payload = {
            "run_id": self.context.run_id,
            "run_date": self.context.run_date.strftime("%Y-%m-%d"),
            "manifest": str(self.context.manifest_path),
            "database": self.database_name,
            "updated_at": datetime.now(timezone.utc).isoformat(),
            "tables": self.tables,
            "load_script": self.load_script,
        }
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        self.report_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
