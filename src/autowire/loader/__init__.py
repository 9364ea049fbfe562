"""Module discovery, loading and multi-pass registration.

Usage::

    from autowire.loader import Loader

    result = await Loader().load(patterns=["services/**/*.py"], namespace="app")
"""

from __future__ import annotations

from autowire.loader.introspection import declared_dependencies, param_names
from autowire.loader.loader import Loader, initialize, load
from autowire.loader.loading import ModuleCache, import_by_identifier, load_module, load_modules
from autowire.loader.metadata import load_metadata
from autowire.loader.naming import namespace_name, qualified_name, registration_name
from autowire.loader.registrar import register_all, register_modules, try_registration
from autowire.loader.scanner import expand, get_module_list
from autowire.loader.types import LoadResult, ModuleDescriptor, ModulePath, RegistrationReport

__all__ = [
    "LoadResult",
    "Loader",
    "ModuleCache",
    "ModuleDescriptor",
    "ModulePath",
    "RegistrationReport",
    "declared_dependencies",
    "expand",
    "get_module_list",
    "import_by_identifier",
    "initialize",
    "load",
    "load_metadata",
    "load_module",
    "load_modules",
    "namespace_name",
    "param_names",
    "qualified_name",
    "register_all",
    "register_modules",
    "registration_name",
    "try_registration",
]
