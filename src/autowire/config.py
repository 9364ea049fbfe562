"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from autowire.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "LoadConfig", "DEFAULT_EXCLUSIONS", "merge_config"]

DEFAULT_EXCLUSIONS = (".git", "node_modules", "__pycache__")


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Read a YAML mapping from disk.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))

        content = path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {path}") from e

        if parsed is None:
            return cls({})
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the top-level mapping."""
        return dict(self._data)


class LoadConfig(BaseModel):
    """Validated options for a single ``load`` call.

    ``patterns`` and ``modules`` accept a single string or a list of strings.
    ``fount`` is the container to register into; ``None`` selects the
    process-wide default container.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    patterns: list[str] = Field(default_factory=list)
    modules: list[str] = Field(default_factory=list)
    namespace: str | None = None
    fount: Any = None
    root: Path = Field(default_factory=Path.cwd)
    exclusions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUSIONS))

    @field_validator("patterns", "modules", "exclusions", mode="before")
    @classmethod
    def _normalize_to_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


def merge_config(
    defaults: Config | Mapping[str, Any] | None,
    config: Mapping[str, Any] | None,
) -> LoadConfig:
    """Shallow-merge per-call options over defaults and validate the result.

    Neither input is mutated. Per-call values win.

    Raises:
        ConfigError: If the merged options do not validate.
    """
    if isinstance(defaults, Config):
        defaults = defaults.to_dict()
    effective = {**(defaults or {}), **(config or {})}
    try:
        return LoadConfig(**effective)
    except ValidationError as e:
        raise ConfigError(message=f"Invalid load configuration: {e}", cause=e) from e
