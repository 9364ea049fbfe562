"""Tests for the example modules in the examples/ directory."""

from __future__ import annotations

import pathlib

import pytest

from autowire import DictContainer, Loader

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent
EXAMPLES_ROOT = PROJECT_ROOT / "examples" / "modules"


class TestExampleModules:
    @pytest.mark.asyncio
    async def test_all_examples_register(self) -> None:
        """Every example loads and none needs the raw fallback."""
        container = DictContainer()
        result = await Loader({"root": str(EXAMPLES_ROOT)}).load(
            patterns=["*.yaml", "*.py"], fount=container, namespace="demo"
        )
        assert result.report.forced == []
        assert sorted(result.loaded) == ["demo.db", "demo.greeter", "demo.settings", "demo.users"]

    @pytest.mark.asyncio
    async def test_greeter_wired_end_to_end(self) -> None:
        container = DictContainer()
        await Loader().load(patterns=["*.yaml", "*.py"], root=EXAMPLES_ROOT, fount=container, namespace="demo")
        greet = container.resolve("demo.greeter")
        assert greet(7) == "Hello, user-7!"

    @pytest.mark.asyncio
    async def test_settings_parsed_as_mapping(self) -> None:
        """The settings file is plain YAML data, not the raw text."""
        container = DictContainer()
        await Loader().load(patterns="settings.yaml", root=EXAMPLES_ROOT, fount=container)
        assert container.resolve("settings") == {"dsn": "sqlite:///:memory:", "greeting": "Hello"}
