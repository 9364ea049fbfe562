"""Dependency containers the loader registers into."""

from __future__ import annotations

import inspect
import logging
import threading
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from autowire.errors import DependencyNotFoundError, InvalidInputError

logger = logging.getLogger(__name__)

__all__ = [
    "Container",
    "ContextualContainer",
    "DictContainer",
    "ScopedResolver",
    "default_container",
    "supports_context",
]


@runtime_checkable
class Container(Protocol):
    """What the loader needs from a container."""

    def can_resolve(self, name: str) -> bool: ...

    def register(self, name: str, value: Any) -> None: ...

    async def inject(self, arg_names: list[str], factory: Callable[..., Any]) -> Any: ...


@runtime_checkable
class ContextualContainer(Container, Protocol):
    """A container that can also resolve names relative to a module."""

    supports_context: bool

    def context(self, module_name: str) -> Any: ...


def supports_context(container: Any) -> bool:
    """Whether a container offers per-module lookups.

    Decided from the explicit ``supports_context`` flag only.
    """
    return bool(getattr(container, "supports_context", False))


class ScopedResolver:
    """Resolves names inside a module's scope: ``name`` -> ``scope.name``."""

    def __init__(self, container: DictContainer, scope: str) -> None:
        self._container = container
        self._scope = scope

    @property
    def scope(self) -> str:
        return self._scope

    def scoped(self, name: str) -> str:
        return f"{self._scope}.{name}"

    def can_resolve(self, name: str) -> bool:
        return self._container.can_resolve(self.scoped(name))

    def resolve(self, name: str) -> Any:
        return self._container.resolve(self.scoped(name))


class DictContainer:
    """In-memory name -> value container.

    Values are stored as given; registering a name again replaces the
    previous value.
    """

    supports_context = True

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._lock = threading.RLock()

    def register(self, name: str, value: Any) -> None:
        """Register a value under a name, replacing any previous one."""
        if not name:
            raise InvalidInputError(message="name must be a non-empty string")
        with self._lock:
            if name in self._values:
                logger.debug("Replacing existing registration '%s'", name)
            self._values[name] = value

    def can_resolve(self, name: str) -> bool:
        with self._lock:
            return name in self._values

    def resolve(self, name: str) -> Any:
        """Return the value registered under name.

        Raises:
            DependencyNotFoundError: If nothing is registered under name.
        """
        with self._lock:
            try:
                return self._values[name]
            except KeyError:
                raise DependencyNotFoundError(name=name) from None

    def unregister(self, name: str) -> bool:
        """Remove a registration. Returns False if name was not registered."""
        with self._lock:
            if name not in self._values:
                return False
            del self._values[name]
            return True

    def names(self, prefix: str | None = None) -> list[str]:
        """Sorted registered names, optionally filtered by prefix."""
        with self._lock:
            names = list(self._values)
        if prefix is not None:
            names = [n for n in names if n.startswith(prefix)]
        return sorted(names)

    def context(self, module_name: str) -> ScopedResolver:
        return ScopedResolver(self, module_name)

    async def inject(self, arg_names: Iterable[str], factory: Callable[..., Any]) -> Any:
        """Call factory with the values of arg_names, awaiting async results.

        Raises:
            DependencyNotFoundError: If an argument name is not registered.
        """
        args = [self.resolve(name) for name in arg_names]
        result = factory(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.can_resolve(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


_default: DictContainer | None = None
_default_lock = threading.Lock()


def default_container() -> DictContainer:
    """Return the process-wide default container, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = DictContainer()
        return _default
