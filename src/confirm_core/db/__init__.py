from __future__ import annotations

from confirm_core.db.confirmations import (
    ConfirmationRow,
    SessionLookup,
    create_confirmation,
    get_confirmation,
    lookup_session,
    mark_confirmed,
)
from confirm_core.db.migrate import init_db

__all__ = [
    "ConfirmationRow",
    "SessionLookup",
    "create_confirmation",
    "get_confirmation",
    "init_db",
    "lookup_session",
    "mark_confirmed",
]
