"""A process-wide registry of factories keyed by type."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, TypeVar

from .errors import ContainerError

T = TypeVar("T")


class Container:
    """Maps a type to a factory that builds instances of it.

    A type that sets a class attribute ``ioc_params`` (a class of parameters)
    is resolved by calling its factory with one parameters object; any other
    type is resolved by calling its factory with no arguments.
    """

    _instance: ClassVar[Container | None] = None

    def __init__(self):
        self._factories: dict[type, Callable[..., Any]] = {}

    @classmethod
    def get(cls) -> Container:
        """The shared container."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_factory(self, cls: type[T], factory: Callable[..., T]) -> None:
        """Register ``factory`` for ``cls``, replacing any earlier one."""
        self._factories[cls] = factory

    def resolve(self, cls: type[T], params: Any = None) -> T:
        """Build an instance of ``cls`` with its registered factory."""
        try:
            factory = self._factories[cls]
        except KeyError:
            raise ContainerError(
                f"Could not find factory for type [{cls.__qualname__}] in IoC container"
            ) from None

        params_type = getattr(cls, "ioc_params", None)
        if params_type is None:
            if params is not None:
                raise TypeError(f"{cls.__qualname__} takes no IoC parameters")
            result = factory()
        else:
            result = factory(params if params is not None else params_type())

        if not isinstance(result, cls):
            raise ContainerError(
                "Could not resolve IoC mapped type\n"
                f"from: [{type(result).__qualname__}]\n"
                f"  to: [{cls.__qualname__}]\n"
            )
        return result