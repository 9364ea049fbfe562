"""Glob-based discovery of module files."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable

from autowire.config import DEFAULT_EXCLUSIONS
from autowire.errors import ConfigNotFoundError, DiscoveryError
from autowire.loader.metadata import META_SUFFIX
from autowire.loader.types import ModulePath

logger = logging.getLogger(__name__)

__all__ = ["expand", "get_module_list"]


def _expand_pattern(root: Path, pattern: str, exclusions: frozenset[str]) -> list[Path]:
    """Expand a single pattern under root, dropping excluded directories."""
    while pattern.startswith("./"):
        pattern = pattern[2:]
    try:
        matches = sorted(root.glob(pattern))
    except (OSError, ValueError, NotImplementedError) as e:
        raise DiscoveryError(pattern=pattern, reason=str(e)) from e

    results: list[Path] = []
    for match in matches:
        rel = match.relative_to(root)
        if exclusions.intersection(rel.parts[:-1]):
            continue
        if not match.is_file():
            continue
        if match.name.endswith(META_SUFFIX):
            continue
        results.append(match)
    return results


async def expand(
    root: str | Path,
    patterns: str | Iterable[str],
    exclusions: Iterable[str] = DEFAULT_EXCLUSIONS,
) -> list[Path]:
    """Expand glob patterns under root into a deduplicated list of files.

    Patterns are expanded concurrently. Order follows the pattern list, then
    sorted match order within each pattern; a file matched by several
    patterns keeps its first position.

    Raises:
        ConfigNotFoundError: If root does not exist.
        DiscoveryError: If a pattern cannot be expanded.
    """
    root = Path(root).resolve()
    patterns = [patterns] if isinstance(patterns, str) else list(patterns)
    if not patterns:
        return []
    if not root.is_dir():
        raise ConfigNotFoundError(config_path=str(root))

    excluded = frozenset(exclusions)
    collections = await asyncio.gather(
        *(asyncio.to_thread(_expand_pattern, root, p, excluded) for p in patterns)
    )

    seen: set[Path] = set()
    results: list[Path] = []
    for collection in collections:
        for path in collection:
            if path in seen:
                continue
            seen.add(path)
            results.append(path)

    if not results:
        logger.warning("No files matched patterns %s under %s", patterns, root)
    return results


async def get_module_list(
    patterns: str | Iterable[str],
    root: str | Path = ".",
    exclusions: Iterable[str] = DEFAULT_EXCLUSIONS,
) -> list[ModulePath]:
    """Discover candidate module files as unnamed ModulePath entries."""
    paths = await expand(root, patterns, exclusions)
    return [ModulePath(path=p) for p in paths]
