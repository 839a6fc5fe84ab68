import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


class Config:
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))

    # Single-file SQLite store; the parent directory is created on startup.
    DB_PATH = os.environ.get("DB_PATH", str(BASE_DIR / "data" / "hrms.db"))
    STATIC_DIR = os.environ.get("STATIC_DIR", str(BASE_DIR / "static"))

    MAX_CONTENT_LENGTH = 1024 * 1024
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
