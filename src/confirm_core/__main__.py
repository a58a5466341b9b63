from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn

from confirm_core.app import create_app
from confirm_core.config import CoreConfig, load_core_config

USAGE = "Usage: confirm <path_to_db>"

logger = logging.getLogger("confirm_core")


def _configure_logging(config: CoreConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.logging.file:
        log_path = Path(config.logging.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="confirm",
        description="Serve confirmation pages backed by a SQLite session store.",
    )
    parser.add_argument("db_path", nargs="?", type=Path, help="Path to the SQLite database")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (default: $CONFIRM_CONFIG)",
    )
    args = parser.parse_args(argv)

    if args.db_path is None:
        print(USAGE)
        return 0

    config_path = args.config
    if config_path is None and os.environ.get("CONFIRM_CONFIG"):
        config_path = Path(os.environ["CONFIRM_CONFIG"])
    config = load_core_config(config_path)

    _configure_logging(config)

    host = os.environ.get("CONFIRM_BIND") or config.network.bind_host
    env_port = os.environ.get("CONFIRM_PORT")
    port = int(env_port) if env_port else config.network.port

    logger.info(f"Server listening on {port}...")
    uvicorn.run(create_app(args.db_path, config), host=host, port=port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
