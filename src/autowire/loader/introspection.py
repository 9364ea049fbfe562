"""Dependency declaration lookup for exported factories."""

from __future__ import annotations

import inspect
from typing import Any, Sequence

__all__ = ["param_names", "declared_dependencies"]

_NAMED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def param_names(func: Any) -> list[str]:
    """Return the formal parameter names of a callable, in declaration order.

    Skips *args, **kwargs and keyword-only parameters, since factories are
    called positionally. For classes the constructor signature is used.
    Callables whose signature cannot be inspected (some builtins) have no
    declared parameters.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return []
    return [name for name, param in sig.parameters.items() if param.kind in _NAMED_KINDS]


def declared_dependencies(value: Any, meta: dict[str, Any] | None = None) -> list[str]:
    """Resolve the dependency list of an exported callable.

    Explicit declarations win over signature inference: the ``dependencies``
    key of companion metadata first, then a ``__dependencies__`` attribute
    on the value, then :func:`param_names`.
    """
    if meta and meta.get("dependencies") is not None:
        return _as_name_list(meta["dependencies"])
    explicit = getattr(value, "__dependencies__", None)
    if explicit is not None:
        return _as_name_list(explicit)
    return param_names(value)


def _as_name_list(names: str | Sequence[str]) -> list[str]:
    if isinstance(names, str):
        return [names]
    return [str(n) for n in names]
