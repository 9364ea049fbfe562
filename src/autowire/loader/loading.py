"""Loading module files into descriptors."""

from __future__ import annotations

import asyncio
import importlib
import importlib.util
import json
import logging
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable

import yaml

from autowire.errors import ModuleLoadError
from autowire.loader.introspection import declared_dependencies
from autowire.loader.metadata import load_metadata, meta_path_for
from autowire.loader.types import ModuleDescriptor, ModulePath

logger = logging.getLogger(__name__)

__all__ = [
    "EXPORT_ATTR",
    "ModuleCache",
    "select_export",
    "import_by_identifier",
    "load_module",
    "load_modules",
]

EXPORT_ATTR = "__export__"
_MISSING = object()


class ModuleCache:
    """Per-run store of loaded descriptors, keyed by absolute path.

    Owned by the caller of ``load``. Loading a path always drops the
    previous entry first, so a file is re-executed on every run.
    """

    def __init__(self) -> None:
        self._entries: dict[Path, ModuleDescriptor] = {}

    def invalidate(self, path: Path) -> None:
        self._entries.pop(path, None)

    def store(self, path: Path, descriptor: ModuleDescriptor) -> None:
        self._entries[path] = descriptor

    def get(self, path: str | Path) -> ModuleDescriptor | None:
        return self._entries.get(Path(path).resolve())

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path).resolve() in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def select_export(mod: ModuleType, stem: str, meta: dict[str, Any] | None = None) -> Any:
    """Pick the exported value of a loaded Python module.

    Order: the attribute named by metadata ``entry_point``, the
    ``__export__`` attribute, an attribute named like the file, and
    finally the module object itself.
    """
    if meta and meta.get("entry_point"):
        attr = str(meta["entry_point"]).split(":")[-1]
        value = getattr(mod, attr, _MISSING)
        if value is _MISSING:
            raise ModuleLoadError(
                module_id=stem,
                reason=f"Entry point '{attr}' not found",
            )
        return value

    value = getattr(mod, EXPORT_ATTR, _MISSING)
    if value is not _MISSING:
        return value
    value = getattr(mod, stem, _MISSING)
    if value is not _MISSING:
        return value
    return mod


def import_by_identifier(identifier: str) -> Any:
    """Import a module by dotted identifier and return its export.

    Raises:
        ModuleLoadError: If the identifier cannot be imported or its import fails.
    """
    try:
        mod = importlib.import_module(identifier)
    except Exception as exc:
        raise ModuleLoadError(module_id=identifier, reason=f"Failed to import module: {exc}") from exc
    return select_export(mod, identifier.rsplit(".", 1)[-1])


def _import_module_from_file(file_path: Path) -> ModuleType:
    """Execute a Python file as a fresh module object, outside sys.modules."""
    module_name = f"autowire_mod_{file_path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, str(file_path))
    if spec is None or spec.loader is None:
        raise ModuleLoadError(
            module_id=str(file_path),
            reason=f"Cannot create import spec for {file_path}",
        )

    mod = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        raise ModuleLoadError(module_id=str(file_path), reason=f"Failed to import module: {exc}") from exc
    return mod


def _read_value(file_path: Path) -> tuple[Any, dict[str, Any]]:
    """Load the exported value of a file and its companion metadata."""
    suffix = file_path.suffix.lower()
    if suffix == ".py":
        meta = load_metadata(meta_path_for(file_path))
        mod = _import_module_from_file(file_path)
        return select_export(mod, file_path.stem, meta), meta

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModuleLoadError(module_id=str(file_path), reason=str(exc)) from exc

    if suffix == ".json":
        try:
            return json.loads(content), {}
        except json.JSONDecodeError as exc:
            raise ModuleLoadError(module_id=str(file_path), reason=f"Invalid JSON: {exc}") from exc
    if suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(content), {}
        except yaml.YAMLError as exc:
            raise ModuleLoadError(module_id=str(file_path), reason=f"Invalid YAML: {exc}") from exc

    raise ModuleLoadError(module_id=str(file_path), reason=f"Unsupported file type '{suffix}'")


def _module_name(module_path: ModulePath, value: Any, meta: dict[str, Any]) -> str:
    if module_path.name:
        return module_path.name
    if meta.get("name"):
        return str(meta["name"])
    own_name = getattr(value, "name", None)
    if isinstance(own_name, str) and own_name:
        return own_name
    return Path(module_path.path).stem


def load_module(module_path: ModulePath, cache: ModuleCache | None = None) -> ModuleDescriptor | None:
    """Load one candidate file into a descriptor.

    Any failure is logged and yields None, so one bad file never stops the
    rest of the batch.
    """
    file_path = Path(module_path.path).resolve()
    if cache is not None:
        cache.invalidate(file_path)

    try:
        value, meta = _read_value(file_path)
    except Exception as e:
        logger.error("Error loading module at %s with: %s", module_path.path, e, exc_info=True)
        return None

    is_function = callable(value)
    dependencies = declared_dependencies(value, meta) if is_function else []
    descriptor = ModuleDescriptor(
        name=_module_name(module_path, value, meta),
        value=value,
        is_function=is_function,
        dependencies=tuple(dependencies),
        path=file_path,
    )
    if cache is not None:
        cache.store(file_path, descriptor)
    return descriptor


async def load_modules(
    module_paths: Iterable[ModulePath],
    cache: ModuleCache | None = None,
) -> list[ModuleDescriptor]:
    """Load candidates one by one on the event loop thread, dropping failures.

    Module code runs on the calling thread; control returns to the loop
    between files.
    """
    results: list[ModuleDescriptor] = []
    for mp in module_paths:
        descriptor = load_module(mp, cache)
        if descriptor is not None:
            results.append(descriptor)
        await asyncio.sleep(0)
    return results
