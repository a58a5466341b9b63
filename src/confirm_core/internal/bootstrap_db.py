from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from confirm_core.db import create_confirmation, init_db, mark_confirmed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m confirm_core.internal.bootstrap_db",
        description="Confirm store internal DB bootstrapper (no HTTP).",
    )
    parser.add_argument("db_path", type=Path, help="Path to the SQLite database")
    parser.add_argument("--migrate", action="store_true", help="Create the confirm table")
    parser.add_argument(
        "--create-session", metavar="ID", action="append", default=[], help="Insert a session ID"
    )
    parser.add_argument(
        "--mark-confirmed", metavar="ID", help="Set is_confirmed for an existing session ID"
    )
    args = parser.parse_args(argv)

    if args.migrate or args.create_session or args.mark_confirmed:
        init_db(args.db_path)

    for session_id in args.create_session:
        row = create_confirmation(args.db_path, session_id=session_id)
        print(json.dumps(asdict(row), ensure_ascii=False))

    if args.mark_confirmed:
        if not mark_confirmed(args.db_path, session_id=args.mark_confirmed):
            print(f"No such session: {args.mark_confirmed}")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
