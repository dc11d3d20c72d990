"""Configuration for a moho project.

Lives at ``.moho/config.yaml``:
- version: schema version
- editor: command used to edit templates (falls back to $EDITOR)
- filters: custom filter name -> sh function body
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from moho.ast.ident import validate_ident
from moho.exceptions import InvalidIdentifierError, MohoError

log = logging.getLogger(__name__)

MOHO_DIR = ".moho"
CONFIG_FILE = "config.yaml"


class ConfigError(MohoError):
    """Raised when .moho/config.yaml is malformed."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        super().__init__(f"Invalid config {path}: {detail}")


class MohoConfig(BaseModel):
    """Project configuration."""

    version: int = Field(default=1, description="Config schema version")
    editor: str | None = Field(
        default=None, description="Editor command, overrides $EDITOR"
    )
    filters: dict[str, str] = Field(
        default_factory=dict, description="Custom filters: name -> function body"
    )

    @field_validator("filters")
    @classmethod
    def check_filter_names(cls, v: dict[str, str]) -> dict[str, str]:
        for name in v:
            try:
                validate_ident(name)
            except InvalidIdentifierError as e:
                raise ValueError(f"filter name: {e.reason}") from e
        return v


def get_moho_dir(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / MOHO_DIR


def get_config_path(cwd: Path | None = None) -> Path:
    return get_moho_dir(cwd) / CONFIG_FILE


def load_config(path: Path) -> MohoConfig:
    """Load config from path. A missing file yields the defaults."""
    if not path.exists():
        log.debug("No config at %s, using defaults", path)
        return MohoConfig()

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping at the top level")

    try:
        return MohoConfig(**data)
    except ValueError as e:
        raise ConfigError(path, str(e)) from e


def save_config(config: MohoConfig, path: Path) -> None:
    """Save config, writing only explicitly set fields."""
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_unset=True)

    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False)
