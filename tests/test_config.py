from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from confirm_core.config import (
    DEFAULT_PORT,
    PACKAGE_TEMPLATES_DIR,
    CoreConfig,
    load_core_config,
    resolve_templates_dir,
)


def test_load_core_config_defaults_when_missing(tmp_path: Path) -> None:
    cfg = load_core_config(tmp_path / "nope.json")
    assert isinstance(cfg, CoreConfig)
    assert cfg.network.port == DEFAULT_PORT == 8888
    assert cfg.network.bind_host == "127.0.0.1"
    assert load_core_config(None) == CoreConfig()


def test_load_core_config_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "confirm.json"
    path.write_text(json.dumps({"network": {"port": "not-an-int"}}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_core_config(path)


def test_templates_dir_defaults_to_package_templates() -> None:
    assert resolve_templates_dir(CoreConfig()) == PACKAGE_TEMPLATES_DIR
    for name in ("index", "confirm", "404"):
        assert (PACKAGE_TEMPLATES_DIR / f"{name}.html").is_file()


def test_relative_templates_dir_resolves_against_config_file(tmp_path: Path) -> None:
    path = tmp_path / "etc" / "confirm.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"paths": {"templates_dir": "views"}}), encoding="utf-8")

    cfg = load_core_config(path)
    assert resolve_templates_dir(cfg) == (tmp_path / "etc" / "views").resolve()
