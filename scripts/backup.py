"""Backup database.

Note: Uses SQLite's online backup API, so the server may keep running.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from hrms_lite.container import build_container
from hrms_lite.database.bootstrap import backup_to


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if settings.DB_PATH == ":memory:":
        raise SystemExit("DB_PATH is ':memory:', nothing to back up.")
    if not Path(settings.DB_PATH).exists():
        raise SystemExit(f"No database at {settings.DB_PATH}")

    container = build_container(db_path=settings.DB_PATH)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = backup_to(container.conn, REPO_ROOT / "backups" / f"hrms_{ts}.db")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
