from __future__ import annotations

import sqlite3
from pathlib import Path

from confirm_core.errors import StoreError

CREATE_CONFIRM_TABLE = """
CREATE TABLE IF NOT EXISTS confirm (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    session_id VARCHAR(255) NOT NULL UNIQUE,
    is_confirmed BOOLEAN DEFAULT 0
);
"""


def init_db(db_path: Path) -> Path:
    """Open (or create) the SQLite file and ensure the confirm table exists.

    - Safe to run multiple times; the table is never altered once created.
    - Parent directories are not created: a bad path is a startup failure.
    """

    db_path = Path(db_path)
    try:
        with sqlite3.connect(db_path) as conn:
            conn.executescript(CREATE_CONFIRM_TABLE)
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to initialize database at {db_path}: {exc}") from exc
    return db_path
