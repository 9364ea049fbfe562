"""autowire - convention-based module loader and dependency injector."""

from __future__ import annotations

# Entry point
from autowire.loader import Loader, LoadResult, ModuleCache, initialize, load
from autowire.loader.types import ModuleDescriptor

# Containers
from autowire.container import Container, ContextualContainer, DictContainer, default_container

# Config
from autowire.config import Config, LoadConfig

# Errors
from autowire.errors import (
    AutowireError,
    ConfigError,
    ConfigNotFoundError,
    DependencyNotFoundError,
    DiscoveryError,
    ErrorCodes,
    InvalidInputError,
    ModuleLoadError,
)

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "Loader",
    "LoadResult",
    "ModuleCache",
    "ModuleDescriptor",
    "initialize",
    "load",
    # Containers
    "Container",
    "ContextualContainer",
    "DictContainer",
    "default_container",
    # Config
    "Config",
    "LoadConfig",
    # Errors
    "ErrorCodes",
    "AutowireError",
    "ConfigError",
    "ConfigNotFoundError",
    "DependencyNotFoundError",
    "DiscoveryError",
    "InvalidInputError",
    "ModuleLoadError",
]
