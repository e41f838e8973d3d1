# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.

    Dependencies are keyed by type (repository interfaces, use case
    classes) or by name ("settings", "user_collection"). Singletons are
    stored as-is; factories are called on every ``get``.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance under ``key``"""
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a factory that builds a fresh instance for every ``get``"""
        self._factories[key] = factory

    def is_registered(self, key: Any) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Any) -> Any:
        """
        Resolve a dependency

        Args:
            key: Type or name the dependency was registered under

        Returns:
            The registered instance, or a new one from its factory

        Raises:
            ValueError: If nothing is registered under ``key``
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()

        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
