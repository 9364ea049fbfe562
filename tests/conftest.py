"""Shared fixtures for the autowire test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from autowire.container import DictContainer
from autowire.loader.introspection import param_names
from autowire.loader.types import ModuleDescriptor


@pytest.fixture
def container() -> DictContainer:
    """An empty in-memory container."""
    return DictContainer()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented file under tmp_path and return its path."""

    def _write(rel_path: str, content: str = "") -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def make_descriptor() -> Callable[..., ModuleDescriptor]:
    """Build descriptors the way the loader would for in-memory exports."""

    def _make(name: str, value: Any, path: Path | None = None) -> ModuleDescriptor:
        is_function = callable(value)
        return ModuleDescriptor(
            name=name,
            value=value,
            is_function=is_function,
            dependencies=tuple(param_names(value)) if is_function else (),
            path=path,
        )

    return _make
