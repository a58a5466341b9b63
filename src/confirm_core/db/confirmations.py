from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from confirm_core.errors import StoreError


@dataclass(frozen=True)
class ConfirmationRow:
    id: int
    session_id: str
    is_confirmed: bool


@dataclass(frozen=True)
class SessionLookup:
    found: bool
    record: ConfirmationRow | None = None


def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def _row_from_db(row: sqlite3.Row) -> ConfirmationRow:
    return ConfirmationRow(
        id=int(row["id"]),
        session_id=row["session_id"],
        is_confirmed=bool(row["is_confirmed"]),
    )


def get_confirmation(db_path: Path, *, session_id: str) -> ConfirmationRow | None:
    try:
        with _connect(db_path) as conn:
            row = conn.execute(
                """
                SELECT id, session_id, is_confirmed
                FROM confirm
                WHERE session_id = ?;
                """.strip(),
                (session_id,),
            ).fetchone()
    except sqlite3.Error as exc:
        raise StoreError(f"Session lookup failed: {exc}") from exc

    if row is None:
        return None
    return _row_from_db(row)


def lookup_session(db_path: Path, *, session_id: str) -> SessionLookup:
    """Check whether a session ID exists.

    A missing row is a normal outcome (``found=False``); only query failures raise.
    """

    record = get_confirmation(db_path, session_id=session_id)
    return SessionLookup(found=record is not None, record=record)


def create_confirmation(db_path: Path, *, session_id: str) -> ConfirmationRow:
    try:
        with _connect(db_path) as conn:
            conn.execute("INSERT INTO confirm (session_id) VALUES (?);", (session_id,))
    except sqlite3.IntegrityError as exc:
        raise StoreError(f"Session ID already exists: {session_id}") from exc
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to create confirmation: {exc}") from exc

    row = get_confirmation(db_path, session_id=session_id)
    if row is None:
        raise StoreError("Failed to read confirmation after insert")
    return row


def mark_confirmed(db_path: Path, *, session_id: str) -> bool:
    """Set ``is_confirmed`` for a session. Returns False when no row matched.

    Not wired to any HTTP route; only the bootstrap tool calls it.
    """

    try:
        with _connect(db_path) as conn:
            cur = conn.execute(
                "UPDATE confirm SET is_confirmed = 1 WHERE session_id = ?;",
                (session_id,),
            )
    except sqlite3.Error as exc:
        raise StoreError(f"Failed to mark session confirmed: {exc}") from exc
    return cur.rowcount > 0
