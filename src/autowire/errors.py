"""Error hierarchy for the autowire loader."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "AutowireError",
    "ConfigNotFoundError",
    "ConfigError",
    "DiscoveryError",
    "ModuleLoadError",
    "DependencyNotFoundError",
    "InvalidInputError",
    "ErrorCodes",
]


class AutowireError(Exception):
    """Base error for all autowire errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(AutowireError):
    """Raised when a configuration file or search root cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration path not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(AutowireError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DiscoveryError(AutowireError):
    """Raised when glob patterns cannot be expanded."""

    def __init__(self, pattern: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DISCOVERY_ERROR",
            message=f"Failed to expand pattern '{pattern}': {reason}",
            details={"pattern": pattern, "reason": reason},
            **kwargs,
        )

    @property
    def pattern(self) -> str:
        """The glob pattern that failed."""
        return self.details["pattern"]


class ModuleLoadError(AutowireError):
    """Raised when a module file cannot be loaded."""

    def __init__(self, module_id: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_LOAD_ERROR",
            message=f"Failed to load module '{module_id}': {reason}",
            details={"module_id": module_id, "reason": reason},
            **kwargs,
        )


class DependencyNotFoundError(AutowireError):
    """Raised when a container is asked for a name it does not hold."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="DEPENDENCY_NOT_FOUND",
            message=f"Dependency not found: {name}",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The name that could not be resolved."""
        return self.details["name"]


class InvalidInputError(AutowireError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.MODULE_LOAD_ERROR:
            handle_bad_module()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    DISCOVERY_ERROR = "DISCOVERY_ERROR"
    MODULE_LOAD_ERROR = "MODULE_LOAD_ERROR"
    DEPENDENCY_NOT_FOUND = "DEPENDENCY_NOT_FOUND"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
