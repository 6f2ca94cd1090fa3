#!/usr/bin/env python3

"""Public construction entry points."""

from functools import lru_cache
from typing import Any, TypeVar

from ..config import Config
from ..domain.errors import InvalidArgumentError
from ..domain.models.reflection import TypeInfo, get_builtin_type
from ..domain.services import ReflectionProvider
from ..domain.services.resolution import ConstructorResolver
from ..infrastructure.reflection import PythonReflectionProvider

T = TypeVar("T")


class Activator:
    """Creates instances by resolving a constructor for runtime arguments.

    Attributes:
        provider: Reflection facility describing types and invoking constructors
        resolver: Constructor resolver bound to ``provider``
    """

    def __init__(self, provider: ReflectionProvider | None = None):
        self.provider = provider if provider is not None else PythonReflectionProvider()
        self.resolver = ConstructorResolver(self.provider)

    @classmethod
    def from_config(cls, config: Config) -> "Activator":
        """Build an activator over Python classes using the configured numeric types."""
        provider = PythonReflectionProvider(
            int_type=get_builtin_type(config.int_type),
            float_type=get_builtin_type(config.float_type),
        )
        return cls(provider)

    def create_instance(self, type_: Any, *args: Any) -> Any:
        """Create an instance of ``type_``.

        With no arguments the zero-argument constructor is used directly;
        otherwise the unique constructor accepting ``args`` is resolved.

        Args:
            type_: ``TypeInfo`` or a host type the provider can describe
            *args: Constructor arguments, None standing for null

        Returns:
            The new instance

        Raises:
            InvalidArgumentError: If ``type_`` is None
            AmbiguousMatchError: If several constructors accept the arguments
            NoMatchingConstructorError: If no constructor accepts the arguments
        """
        if type_ is None:
            raise InvalidArgumentError("type must not be None")
        return self.resolver.resolve(self.describe(type_), args)

    def create_instance_of(self, type_: type[T]) -> T:
        """Zero-argument construction of a Python class, typed as that class."""
        return self.create_instance(type_)

    def describe(self, type_: Any) -> TypeInfo:
        return self.provider.describe(type_)

    def list_constructors(self, type_: Any) -> list[str]:
        """Render the constructor signatures of a type, in declaration order."""
        type_info = self.describe(type_)
        return [str(ctor) for ctor in self.provider.get_constructors(type_info)]


@lru_cache(maxsize=1)
def get_default_activator() -> Activator:
    return Activator()


def create_instance(type_: Any, *args: Any) -> Any:
    """Create an instance through the shared Python-class activator."""
    return get_default_activator().create_instance(type_, *args)
