from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple


def load_template(template_path: Optional[str | Path]) -> str:
    if not template_path:
        return ""
    path = Path(template_path)
    if not path.exists():
        raise FileNotFoundError(f"Post-load template not found: {path}")
    return path.read_text(encoding="utf-8")


def render_bulk_insert(csv_name: str, table_name: str, target_dir: str) -> str:
    source = f"{target_dir.rstrip('/')}/{csv_name}"
    return (
        f"BULK INSERT {table_name}\n"
        f" FROM '{source}'\n"
        ' WITH (FORMAT = "CSV", ROWTERMINATOR = "\\n", KEEPIDENTITY);\n\n'
    )


def render_load_script(outputs: Iterable[Tuple[str, str]], target_dir: str, post_load_sql: str = "") -> str:
    statements = [render_bulk_insert(csv_name, table_name, target_dir) for csv_name, table_name in outputs]
    return "".join(statements) + post_load_sql


def write_load_script(
    path: Path,
    outputs: Iterable[Tuple[str, str]],
    target_dir: str,
    post_load_sql: str = "",
    encoding: str = "utf-8",
) -> Path:
    path.write_text(render_load_script(outputs, target_dir, post_load_sql), encoding=encoding, newline="")
    return path
