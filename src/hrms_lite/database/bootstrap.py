from __future__ import annotations

import logging
import sqlite3
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def read_schema(schema_path: Optional[Union[str, Path]] = None) -> str:
    if schema_path is not None:
        return Path(schema_path).read_text(encoding="utf-8")
    return resources.files(__package__).joinpath("schema.sql").read_text(encoding="utf-8")


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[Union[str, Path]] = None) -> None:
    """Create the tables if they are missing (idempotent)."""
    sql = read_schema(schema_path)
    with conn_factory.lock:
        conn_factory.connect().executescript(sql)
    logger.debug("schema applied to %s", conn_factory.path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with conn_factory.lock:
        cur = conn_factory.connect().execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]


def backup_to(conn_factory: DatabaseConnection, target: Union[str, Path]) -> Path:
    """Copy the live store into ``target`` using SQLite's online backup."""
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    with conn_factory.lock:
        dest = sqlite3.connect(str(target))
        try:
            conn_factory.connect().backup(dest)
        finally:
            dest.close()
    return target
