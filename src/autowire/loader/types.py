"""Loader types: ModulePath, ModuleDescriptor, LoadResult, RegistrationReport."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = [
    "ModulePath",
    "ModuleDescriptor",
    "LoadResult",
    "RegistrationReport",
]


@dataclass
class ModulePath:
    """A discovered file plus an optional explicit name override."""

    path: Path
    name: str | None = None


@dataclass(frozen=True)
class ModuleDescriptor:
    """A loaded module ready for registration.

    Attributes:
        name: Module name, before namespace and segment expansion.
        value: The exported value, either a plain value or a factory.
        is_function: Whether ``value`` is callable.
        dependencies: Declared dependency names, in order.
        path: Origin of the module, used for diagnostics only.
    """

    name: str
    value: Any
    is_function: bool = False
    dependencies: tuple[str, ...] = ()
    path: Path | None = None


@dataclass
class RegistrationReport:
    """Outcome of a multi-pass registration run."""

    resolved: list[str] = field(default_factory=list)
    forced: list[str] = field(default_factory=list)
    passes: int = 0


@dataclass
class LoadResult:
    """Result of ``load``: every registered name and the container used."""

    loaded: list[str]
    fount: Any
    report: RegistrationReport = field(default_factory=RegistrationReport)
