from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class DBConfig:
    path: str

    @property
    def in_memory(self) -> bool:
        return self.path == ":memory:"


class DatabaseConnection:
    """Owns the single SQLite connection of an application.

    Built once at startup and passed to every repository. The connection is
    shared across request threads, so statements are serialized by ``lock``.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._config.path

    def ensure_directory(self) -> None:
        if self._config.in_memory:
            return
        Path(self._config.path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self.ensure_directory()
            conn = sqlite3.connect(self._config.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            self._conn = conn
        return self._conn

    def close(self) -> None:
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
