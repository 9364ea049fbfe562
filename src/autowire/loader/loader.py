"""Entry point: discover, load and register modules in one call."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from autowire.config import Config, LoadConfig, merge_config
from autowire.container import default_container
from autowire.loader.loading import ModuleCache, import_by_identifier, load_modules
from autowire.loader.naming import registration_name
from autowire.loader.registrar import register_all
from autowire.loader.scanner import get_module_list
from autowire.loader.types import LoadResult

logger = logging.getLogger(__name__)

__all__ = ["Loader", "initialize", "load"]


class Loader:
    """Loads modules matching glob patterns into a container.

    Defaults given here are merged under the options of every ``load``
    call; per-call options win.

    Usage::

        loader = Loader({"namespace": "app"})
        result = await loader.load(patterns="services/*.py")
        result.fount.resolve("app.db")
    """

    def __init__(self, defaults: Config | Mapping[str, Any] | None = None) -> None:
        if isinstance(defaults, Config):
            defaults = defaults.to_dict()
        self._defaults: dict[str, Any] = dict(defaults or {})

    @property
    def defaults(self) -> dict[str, Any]:
        return dict(self._defaults)

    async def load(
        self,
        config: LoadConfig | Mapping[str, Any] | None = None,
        cache: ModuleCache | None = None,
        **overrides: Any,
    ) -> LoadResult:
        """Discover, load and register modules.

        Args:
            config: Per-call options, as a mapping or a LoadConfig.
            cache: Load cache owned by the caller; a fresh one is used if None.
            **overrides: Per-call options given as keywords; win over config.

        Returns:
            LoadResult with every registration name (pre-declared modules
            last) and the container that was used.

        Raises:
            ConfigError: If the merged options are invalid.
            ConfigNotFoundError: If the search root does not exist.
            DiscoveryError: If a pattern cannot be expanded.
            ModuleLoadError: If a pre-declared module cannot be imported.
        """
        if isinstance(config, LoadConfig):
            config = config.model_dump(exclude_unset=True)
        effective = merge_config(self._defaults, {**(config or {}), **overrides})
        return await _load(effective, cache if cache is not None else ModuleCache())


async def _load(config: LoadConfig, cache: ModuleCache) -> LoadResult:
    fount = config.fount if config.fount is not None else default_container()

    for identifier in config.modules:
        fount.register(identifier, import_by_identifier(identifier))

    module_paths = await get_module_list(config.patterns, config.root, config.exclusions)
    descriptors = await load_modules(module_paths, cache)
    report = await register_all(fount, config.namespace, descriptors)

    keys = [registration_name(config.namespace, d.name) for d in descriptors]
    logger.info(
        "Loaded %d of %d discovered modules (%d forced), %d pre-declared",
        len(descriptors),
        len(module_paths),
        len(report.forced),
        len(config.modules),
    )
    return LoadResult(loaded=keys + list(config.modules), fount=fount, report=report)


def initialize(defaults: Config | Mapping[str, Any] | None = None) -> Loader:
    """Create a Loader bound to the given defaults."""
    return Loader(defaults)


async def load(config: LoadConfig | Mapping[str, Any] | None = None, **overrides: Any) -> LoadResult:
    """Load with no defaults; shorthand for ``Loader().load(...)``."""
    return await Loader().load(config, **overrides)
