"""Registration and dependency lookup names."""

from __future__ import annotations

__all__ = ["registration_name", "qualified_name", "namespace_name"]


def registration_name(namespace: str | None, name: str) -> str:
    """Build the dotted name a module is registered under.

    Underscores in ``name`` become segment separators, and ``namespace``
    (when given) is prepended: ``("app", "db_pool") -> "app.db.pool"``.
    """
    segments = name.split("_")
    if namespace:
        return ".".join([namespace, *segments])
    return ".".join(segments)


def qualified_name(namespace: str | None, name: str, arg: str) -> str:
    """Name of ``arg`` scoped to the requesting module."""
    return f"{registration_name(namespace, name)}.{arg}"


def namespace_name(namespace: str | None, arg: str) -> str | None:
    """Name of ``arg`` scoped to the namespace, or None without one."""
    if not namespace:
        return None
    return f"{namespace}.{arg}"
