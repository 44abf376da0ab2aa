from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from uuid import uuid4

from ..utils.dates import to_datestr


@dataclass(frozen=True)
class RunContext:
    run_date: date
    manifest_path: Path
    output_dir: Path
    log_dir: Path
    run_id: str

    @classmethod
    def create(cls, run_date: date, manifest_path: Path, output_dir: Path, log_dir: Path) -> "RunContext":
        run_id = f"{to_datestr(run_date)}-{uuid4().hex[:8]}"
        return cls(
            run_date=run_date,
            manifest_path=manifest_path,
            output_dir=output_dir,
            log_dir=log_dir,
            run_id=run_id,
        )

    @property
    def report_dir(self) -> Path:
        return self.output_dir / "reports"

    def unload_dir(self, database_name: str, suffix: str = ".exp") -> Path:
        # dbexport places the .unl files next to the manifest in <database>.exp
        return self.manifest_path.parent / f"{database_name}{suffix}"
