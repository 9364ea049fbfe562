"""Tests for the top-level package exports."""

from __future__ import annotations

import autowire


class TestPublicApi:
    def test_all_names_importable(self) -> None:
        for name in autowire.__all__:
            assert hasattr(autowire, name), name

    def test_version(self) -> None:
        assert autowire.__version__ == "0.1.0"

    def test_initialize_returns_loader(self) -> None:
        assert isinstance(autowire.initialize({"namespace": "x"}), autowire.Loader)
