"""Tests for dependency declaration lookup."""

from __future__ import annotations

from unittest.mock import patch

from autowire.loader.introspection import declared_dependencies, param_names


class TestParamNames:
    def test_zero_arity(self) -> None:
        assert param_names(lambda: None) == []

    def test_ordered_names(self) -> None:
        """Parameter names come back in declaration order."""

        def factory(db, cache, logger):
            return None

        assert param_names(factory) == ["db", "cache", "logger"]

    def test_variadics_skipped(self) -> None:
        """*args and **kwargs are not dependencies."""

        def factory(db, *args, **kwargs):
            return None

        assert param_names(factory) == ["db"]

    def test_only_variadics(self) -> None:
        def factory(*args, **kwargs):
            return None

        assert param_names(factory) == []

    def test_keyword_only_skipped(self) -> None:
        """Keyword-only parameters cannot be filled positionally."""

        def factory(db, *, retries=3):
            return None

        assert param_names(factory) == ["db"]

    def test_class_uses_constructor(self) -> None:
        """Classes report their __init__ parameters without self."""

        class Service:
            def __init__(self, db, cache):
                self.db = db
                self.cache = cache

        assert param_names(Service) == ["db", "cache"]

    def test_uninspectable_builtin(self) -> None:
        """Callables without a signature declare nothing."""
        with patch("inspect.signature", side_effect=ValueError("no signature")):
            assert param_names(len) == []

    def test_async_function(self) -> None:
        async def factory(db):
            return db

        assert param_names(factory) == ["db"]


class TestDeclaredDependencies:
    def test_falls_back_to_signature(self) -> None:
        def factory(a, b):
            return None

        assert declared_dependencies(factory) == ["a", "b"]

    def test_dunder_attribute_wins_over_signature(self) -> None:
        """__dependencies__ replaces signature inference."""

        def factory(*deps):
            return deps

        factory.__dependencies__ = ["db", "cache"]
        assert declared_dependencies(factory) == ["db", "cache"]

    def test_metadata_wins_over_dunder(self) -> None:
        """Metadata dependencies take precedence over everything."""

        def factory(a):
            return a

        factory.__dependencies__ = ["b"]
        assert declared_dependencies(factory, {"dependencies": ["c"]}) == ["c"]

    def test_single_string_declaration(self) -> None:
        def factory(x):
            return x

        assert declared_dependencies(factory, {"dependencies": "db"}) == ["db"]

    def test_empty_metadata_declaration(self) -> None:
        """An explicit empty list means no dependencies."""

        def factory(a):
            return a

        assert declared_dependencies(factory, {"dependencies": []}) == []
