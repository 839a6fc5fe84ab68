from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from hrms_lite.container import build_container
from hrms_lite.database.bootstrap import apply_schema, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_path=settings.DB_PATH)

    apply_schema(container.conn)
    tables = list_tables(container.conn)
    print(f"OK: Applied schema.sql -> {container.conn.path} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
