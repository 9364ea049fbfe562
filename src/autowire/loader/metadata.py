"""Companion metadata files for module sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from autowire.errors import ConfigError

logger = logging.getLogger(__name__)

__all__ = ["META_SUFFIX", "meta_path_for", "load_metadata"]

META_SUFFIX = "_meta.yaml"
_KNOWN_KEYS = {"name", "entry_point", "dependencies"}


def meta_path_for(file_path: Path) -> Path:
    """Return the companion metadata path for a module file."""
    return file_path.with_name(file_path.stem + META_SUFFIX)


def load_metadata(meta_path: Path) -> dict[str, Any]:
    """Load a *_meta.yaml companion metadata file.

    Returns empty dict if file does not exist (metadata is optional).
    """
    if not meta_path.exists():
        return {}

    content = meta_path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in metadata file: {meta_path}") from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ConfigError(message=f"Metadata file must be a YAML mapping: {meta_path}")

    unknown = set(parsed) - _KNOWN_KEYS
    if unknown:
        logger.warning("Ignoring unknown keys %s in %s", sorted(unknown), meta_path)
    deps = parsed.get("dependencies")
    if deps is not None and not isinstance(deps, (list, str)):
        raise ConfigError(message=f"'dependencies' must be a list of names: {meta_path}")
    return parsed
