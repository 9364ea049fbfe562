"""Multi-pass registration of loaded modules into a container.

Modules in one batch may depend on each other. Instead of sorting them up
front, every pass attempts all modules that are still unregistered; a module
whose dependencies cannot all be resolved yet is carried to the next pass.
When passes stop making progress the remaining modules are registered with
their raw exported values so a load always finishes.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Iterable

from autowire.container import Container, supports_context
from autowire.loader.naming import namespace_name, qualified_name, registration_name
from autowire.loader.types import ModuleDescriptor, RegistrationReport

logger = logging.getLogger(__name__)

__all__ = [
    "MAX_STALLED_PASSES",
    "ORIGIN_ATTR",
    "resolve_arguments",
    "try_registration",
    "register_modules",
    "register_all",
]

MAX_STALLED_PASSES = 2
ORIGIN_ATTR = "_path"


def _tag_origin(value: Any, descriptor: ModuleDescriptor) -> None:
    """Attach the module's origin path to a resolved value, where possible."""
    try:
        setattr(value, ORIGIN_ATTR, descriptor.path)
    except (AttributeError, TypeError):
        logger.debug("Cannot tag %s value of '%s' with its origin", type(value).__name__, descriptor.name)


def resolve_arguments(
    container: Container,
    namespace: str | None,
    descriptor: ModuleDescriptor,
    contextual: bool = False,
) -> list[str] | None:
    """Map each declared dependency to the first name the container can resolve.

    Candidates, in order: the module-scoped lookup (contextual containers
    only), the module-qualified name, the namespace name, the bare name.
    Returns None if any dependency has no resolvable candidate.
    """
    module_key = registration_name(namespace, descriptor.name)
    scoped = container.context(module_key) if contextual else None  # type: ignore[attr-defined]
    arg_list: list[str] = []
    for arg in descriptor.dependencies:
        qualified = qualified_name(namespace, descriptor.name, arg)
        ns_name = namespace_name(namespace, arg)
        if scoped is not None and scoped.can_resolve(arg):
            arg_list.append(qualified)
        elif container.can_resolve(qualified):
            arg_list.append(qualified)
        elif ns_name is not None and container.can_resolve(ns_name):
            arg_list.append(ns_name)
        elif container.can_resolve(arg):
            arg_list.append(arg)
        else:
            return None
    return arg_list


async def try_registration(
    container: Container,
    namespace: str | None,
    descriptor: ModuleDescriptor,
    contextual: bool = False,
) -> bool:
    """Attempt to register one module. Returns False if it must wait a pass.

    Plain values register as-is. Factories without dependencies are called
    directly; errors they raise propagate. Factories with dependencies are
    injected once every dependency resolves.
    """
    name = registration_name(namespace, descriptor.name)

    if not descriptor.is_function:
        container.register(name, descriptor.value)
        logger.debug("Registered value '%s'", name)
        return True

    if not descriptor.dependencies:
        result = descriptor.value()
        if inspect.isawaitable(result):
            result = await result
        _tag_origin(result, descriptor)
        container.register(name, result)
        logger.debug("Registered factory result '%s'", name)
        return True

    arg_list = resolve_arguments(container, namespace, descriptor, contextual)
    if arg_list is None:
        return False

    try:
        result = await container.inject(arg_list, descriptor.value)
    except Exception as e:
        logger.warning("Injection into '%s' failed, retrying next pass: %s", name, e)
        return False

    _tag_origin(result, descriptor)
    container.register(name, result)
    logger.debug("Registered '%s' with %s", name, arg_list)
    return True


async def register_modules(
    container: Container,
    namespace: str | None,
    descriptors: list[ModuleDescriptor],
    contextual: bool = False,
) -> list[ModuleDescriptor]:
    """Run one pass over descriptors concurrently; return those not registered.

    Every attempt of the pass settles before the first error raised by a
    factory is re-raised.
    """
    outcomes = await asyncio.gather(
        *(try_registration(container, namespace, d, contextual) for d in descriptors),
        return_exceptions=True,
    )
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return [d for d, ok in zip(descriptors, outcomes) if not ok]


async def register_all(
    container: Container,
    namespace: str | None,
    descriptors: Iterable[ModuleDescriptor],
) -> RegistrationReport:
    """Register a batch in repeated passes, forcing whatever never resolves.

    The stalled-pass counter only grows: two passes without progress end the
    run even if other passes in between did make progress.
    """
    contextual = supports_context(container)
    report = RegistrationReport()
    batch = list(descriptors)
    failures = 0

    while batch and failures < MAX_STALLED_PASSES:
        remaining = await register_modules(container, namespace, batch, contextual)
        report.passes += 1
        if len(remaining) == len(batch):
            failures += 1
        logger.debug(
            "Pass %d: %d remaining of %d, stalled passes %d",
            report.passes,
            len(remaining),
            len(batch),
            failures,
        )
        pending = {id(d) for d in remaining}
        report.resolved.extend(
            registration_name(namespace, d.name) for d in batch if id(d) not in pending
        )
        batch = remaining

    if batch:
        for d in batch:
            name = registration_name(namespace, d.name)
            container.register(name, d.value)
            report.forced.append(name)
        logger.warning(
            "Could not resolve dependencies after %d passes, registered raw values for: %s",
            report.passes,
            ", ".join(report.forced),
        )

    return report
