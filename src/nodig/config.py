"""Application configuration: settings schema and nodig.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "nodig.yaml"
ENV_PREFIX = "NODIG_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    vault_dir:    str = Field(default="content", description="Root directory of the markdown vault")
    output_dir:   str = Field(default="dist",    description="Directory for exported pages + index JSON")
    plugins:      list[str] = Field(default_factory=list, description="Plugin import specs, 'module:attribute'")
    sort_pages:   bool = Field(default=True,  description="Sort pages by path after loading")
    slugify_urls: bool = Field(default=False, description="Slugify page urls derived from paths")
    log_level:    str = Field(default="INFO", description="Logging level for the nodig logger")

    @field_validator("plugins", mode="before")
    @classmethod
    def _split_plugins(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings, got {type(data).__name__}")
    return data


def load_config(overrides: dict[str, Any] = None, path: Path = None) -> Settings:
    """Build Settings from layered sources, lowest precedence first:

    field defaults, the YAML file at ``path`` (default ./nodig.yaml, skipped
    when absent), NODIG_<FIELD> env vars, then non-None ``overrides``.
    Raises ValueError for an unreadable config or invalid values.
    """
    path = Path(path or CONFIG_FILE)
    data = _read_config_file(path) if path.is_file() else {}

    env = {name: os.environ[key] for name in Settings.model_fields
           if os.environ.get(key := f"{ENV_PREFIX}{name.upper()}")}
    data.update(env)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
