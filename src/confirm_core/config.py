from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PORT = 8888
PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "ui" / "templates"


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class PathOverrides(BaseModel):
    templates_dir: str | None = Field(
        default=None,
        description=(
            "Directory holding index.html, confirm.html and 404.html; if relative, "
            "resolved against the config file's directory"
        ),
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    file: str | None = Field(default=None, description="Optional rotating log file path.")
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class CoreConfig(BaseModel):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    paths: PathOverrides = Field(default_factory=PathOverrides)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Set by load_core_config; used to resolve relative overrides.
    base_dir: Path | None = Field(default=None, exclude=True)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_core_config(config_path: Path | None = None) -> CoreConfig:
    """Load config from a JSON file.

    - If no path is given or the file is missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    if config_path is None or not config_path.exists():
        return CoreConfig()

    raw = _read_json(config_path)
    config = CoreConfig.model_validate(raw)
    return config.model_copy(update={"base_dir": config_path.resolve().parent})


def resolve_templates_dir(config: CoreConfig) -> Path:
    raw = config.paths.templates_dir
    if raw is None or not str(raw).strip():
        return PACKAGE_TEMPLATES_DIR
    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        base = config.base_dir or Path.cwd()
        candidate = base / candidate
    return candidate.resolve()
