from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection


class DuplicateKeyError(Exception):
    """A write hit a UNIQUE or PRIMARY KEY constraint."""

    def __init__(self, columns: Tuple[str, ...]):
        super().__init__(f"duplicate key on {', '.join(columns) or '?'}")
        self.columns = columns


class MissingReferenceError(Exception):
    """A write referenced a parent row that does not exist."""


def _violated_columns(message: str) -> Tuple[str, ...]:
    # e.g. "UNIQUE constraint failed: attendance.employee_id, attendance.date"
    _, _, tail = message.partition(":")
    return tuple(part.strip().split(".")[-1] for part in tail.split(",") if part.strip())


def translate_integrity_error(exc: sqlite3.IntegrityError) -> Exception:
    message = str(exc)
    if message.startswith("UNIQUE constraint failed"):
        return DuplicateKeyError(_violated_columns(message))
    if message.startswith("FOREIGN KEY constraint failed"):
        return MissingReferenceError(message)
    return exc


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Tuple[sqlite3.Connection, sqlite3.Cursor]]:
    with conn_factory.lock:
        conn = conn_factory.connect()
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            translated = translate_integrity_error(exc)
            if translated is exc:
                raise
            raise translated from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()


def fetchone(cur: sqlite3.Cursor) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur: sqlite3.Cursor) -> List[Dict[str, Any]]:
    return [dict(r) for r in cur.fetchall() or []]
