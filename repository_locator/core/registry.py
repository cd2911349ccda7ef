"""
Generic registry for components.

This module provides a reusable Registry class that handles registration,
lookup, and validation for pluggable components like repository backends.
"""

from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """Generic registry for class-based components.

    Provides a consistent pattern for registering and retrieving backends
    by name, with validation against a base class.

    Example:
        REPOSITORY_REGISTRY = Registry(RepositoryInterface, "repository protocol")
        REPOSITORY_REGISTRY.register("file", FileRepository)
        repository = REPOSITORY_REGISTRY.get("file", "file:///srv/repo")
    """

    def __init__(self, base_class: Type[T], name: str):
        """Initialize the registry.

        Args:
            base_class: The base class that registered items must implement.
            name: Human-readable name for error messages (e.g., "repository protocol").
        """
        self._registry: Dict[str, Type[T]] = {}
        self._base = base_class
        self._name = name

    def register(self, key: str, cls: Type[T]) -> None:
        """Register a class under the given key.

        Args:
            key: The identifier to register the class under.
            cls: The class to register (must be a subclass of base_class).

        Raises:
            ValueError: If cls is not a subclass of base_class.
        """
        if not isinstance(cls, type) or not issubclass(cls, self._base):
            raise ValueError(f"{getattr(cls, '__name__', cls)} must implement {self._base.__name__}")
        self._registry[key] = cls

    def get(self, key: str, *args: Any, **kwargs: Any) -> T:
        """Get a new instance of the registered class.

        Args:
            key: The identifier to look up.
            *args: Positional arguments passed to the constructor.
            **kwargs: Keyword arguments passed to the constructor.

        Returns:
            A new instance of the registered class.

        Raises:
            ValueError: If the key is not registered.
        """
        if key not in self._registry:
            available = list(self._registry.keys())
            raise ValueError(f"Unknown {self._name} '{key}'. Available: {available}")
        return self._registry[key](*args, **kwargs)

    def __contains__(self, key: str) -> bool:
        """Return True if a class is registered under the given key."""
        return key in self._registry

    def keys(self) -> List[str]:
        """Return all registered keys."""
        return list(self._registry.keys())

    def register_decorator(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Return a decorator that registers the class under the given key.

        Enables self-registration pattern where backends register themselves
        at import time, avoiding explicit registration in factory files.

        Example:
            @REPOSITORY_REGISTRY.register_decorator("file")
            class FileRepository(RepositoryInterface):
                ...
        """

        def decorator(cls: Type[T]) -> Type[T]:
            self.register(key, cls)
            return cls

        return decorator
