from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from confirm_core.app import create_app
from confirm_core.config import PACKAGE_TEMPLATES_DIR
from confirm_core.errors import StoreError


def test_startup_creates_database(tmp_path: Path, caplog) -> None:
    db_path = tmp_path / "confirm.db"
    caplog.set_level(logging.INFO)

    with TestClient(create_app(db_path)) as client:
        assert client.app.state.db_path == db_path
        assert client.app.state.template_loader.directory == PACKAGE_TEMPLATES_DIR

    assert db_path.is_file()
    with sqlite3.connect(db_path) as conn:
        assert conn.execute("SELECT COUNT(*) FROM confirm;").fetchone()[0] == 0
    assert "DB loaded successfully" in caplog.text


def test_startup_fails_on_unopenable_database(tmp_path: Path) -> None:
    app = create_app(tmp_path / "missing-dir" / "confirm.db")

    with pytest.raises(StoreError):
        with TestClient(app):
            pass


def test_requests_are_logged(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="confirm_core.app")

    with TestClient(create_app(tmp_path / "confirm.db")) as client:
        client.get("/confirm")

    assert "GET /confirm - 200" in caplog.text
