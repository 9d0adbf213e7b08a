"""
Indicator Registry - Discovery and Lookup by Name

Philosophy:
- "Convention over configuration": any concrete BaseIndicator subclass in
  tickwindow.indicators.buildin is discovered automatically
- Registry names are the snake_case class names ("fast_stochastic")
- Default lengths come from SystemConfig.indicators, then the class default

Usage:
    registry = get_indicator_registry()

    # List available indicators
    print(registry.list_names())  # ['extremum_tracker', 'fast_stochastic', ...]

    # Create with explicit or default length
    stoch = registry.create("fast_stochastic", length=5)
    roc = registry.create("rate_of_change")  # length 9 unless configured
"""

import importlib
import inspect
import pkgutil
from typing import Any

import structlog

import tickwindow.indicators.buildin as buildin
from tickwindow.errors import ComponentNotFoundError, DuplicateComponentError, InvalidComponentError
from tickwindow.indicators.base import BaseIndicator, snake_case
from tickwindow.system.config import IndicatorDefaults, get_system_config

logger = structlog.get_logger(__name__)


class IndicatorRegistry:
    """
    Registry of indicator classes.

    Responsibilities:
    - Validate that registered classes inherit from BaseIndicator
    - Reject duplicate names unless overriding explicitly
    - Build instances by name with configured default lengths
    """

    def __init__(self, defaults: IndicatorDefaults | None = None):
        """
        Initialize registry.

        Args:
            defaults: Default lengths (default: SystemConfig.indicators at create() time)
        """
        self._defaults = defaults
        self._registry: dict[str, type[BaseIndicator]] = {}
        self._metadata: dict[str, dict[str, Any]] = {}

    def register(
        self,
        name: str,
        indicator_class: type[BaseIndicator],
        metadata: dict[str, Any] | None = None,
        allow_override: bool = False,
    ) -> None:
        """
        Register an indicator class.

        Args:
            name: Registry key
            indicator_class: Concrete BaseIndicator subclass
            metadata: Optional metadata (module, source)
            allow_override: Allow replacing an existing entry

        Raises:
            InvalidComponentError: If class doesn't inherit from BaseIndicator
            DuplicateComponentError: If name already registered (and not allow_override)
        """
        if not (inspect.isclass(indicator_class) and issubclass(indicator_class, BaseIndicator)):
            raise InvalidComponentError(f"{getattr(indicator_class, '__name__', indicator_class)} does not inherit from BaseIndicator")

        if name in self._registry and not allow_override:
            existing = self._registry[name]
            raise DuplicateComponentError(
                f"indicator '{name}' already registered ({existing.__module__}.{existing.__name__})"
            )

        self._registry[name] = indicator_class
        self._metadata[name] = metadata or {}
        logger.debug("registry.registered", name=name, indicator=indicator_class.__name__)

    def discover(self) -> int:
        """
        Register every concrete indicator in tickwindow.indicators.buildin.

        Returns:
            Number of indicators registered
        """
        count = 0
        for module_info in pkgutil.iter_modules(buildin.__path__, f"{buildin.__name__}."):
            module = importlib.import_module(module_info.name)
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module.__name__ or inspect.isabstract(obj):
                    continue
                if not issubclass(obj, BaseIndicator):
                    continue
                name = snake_case(obj.__name__)
                if name in self._registry:
                    continue
                self.register(name, obj, {"source_type": "buildin", "module_name": module.__name__})
                count += 1
        return count

    def get(self, name: str) -> type[BaseIndicator]:
        """
        Get indicator class by name.

        Raises:
            ComponentNotFoundError: If name not in registry
        """
        if name not in self._registry:
            available = ", ".join(sorted(self._registry.keys()))
            raise ComponentNotFoundError(f"indicator '{name}' not found. Available: {available}")

        return self._registry[name]

    def create(self, name: str, length: int | None = None) -> BaseIndicator:
        """
        Create an indicator instance by name.

        Args:
            name: Registry name
            length: Window length. If None, the configured default for this
                name, else the class default_length.

        Returns:
            New indicator instance

        Raises:
            ComponentNotFoundError: If name not in registry
            InvalidParameterError: If length < 1
        """
        indicator_class = self.get(name)
        if length is None:
            defaults = self._defaults if self._defaults is not None else get_system_config().indicators
            length = defaults.length_for(name, indicator_class.default_length)
        return indicator_class(length)

    def get_metadata(self, name: str) -> dict[str, Any]:
        """Get metadata for an indicator."""
        if name not in self._metadata:
            raise ComponentNotFoundError(f"indicator '{name}' not found")
        return dict(self._metadata[name])

    def list_names(self) -> list[str]:
        """Sorted list of registered names."""
        return sorted(self._registry.keys())

    def clear(self) -> None:
        """Clear all registered indicators."""
        self._registry.clear()
        self._metadata.clear()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, name: str) -> bool:
        return name in self._registry

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} indicators={len(self)}>"


_indicator_registry: IndicatorRegistry | None = None


def get_indicator_registry() -> IndicatorRegistry:
    """
    Get singleton indicator registry with built-ins discovered.

    Usage:
        registry = get_indicator_registry()
        low = registry.create("minimum", length=3)
    """
    global _indicator_registry
    if _indicator_registry is None:
        _indicator_registry = IndicatorRegistry()
        _indicator_registry.discover()
    return _indicator_registry
