#!/usr/bin/env python3

"""Capability interface between the resolver and the host type system."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..models.reflection import ConstructorInfo, ParameterInfo, TypeInfo, TypedArray


class ReflectionProvider(ABC):
    """Reflection facility the constructor resolver depends on.

    This is the only seam to the host platform: enumerating constructors,
    reading parameters, invoking and typing runtime values all go through it,
    so the resolver can run against synthetic descriptors in tests.
    """

    @abstractmethod
    def get_constructors(self, type_info: TypeInfo) -> Sequence[ConstructorInfo]:
        """Get the public constructors of a type."""

    def get_parameters(self, constructor: ConstructorInfo) -> Sequence[ParameterInfo]:
        return constructor.get_parameters()

    def is_variadic_marker(self, parameter: ParameterInfo) -> bool:
        return parameter.is_param_array

    @abstractmethod
    def invoke(self, constructor: ConstructorInfo, arguments: Sequence[Any]) -> Any:
        """Run a constructor with an already built argument vector.

        Whatever the constructor raises must propagate unchanged.
        """

    @abstractmethod
    def runtime_type_of(self, value: Any) -> TypeInfo | None:
        """Get the runtime type of a value, or None for a null value."""

    @abstractmethod
    def create_default(self, type_info: TypeInfo) -> Any:
        """Construct an instance through the zero-argument path."""

    def describe(self, type_: Any) -> TypeInfo:
        """Turn a host type handle into a descriptor.

        Raises:
            TypeError: If the provider cannot describe ``type_``
        """
        if isinstance(type_, TypeInfo):
            return type_
        raise TypeError(f"{type(self).__name__} cannot describe {type_!r}")

    def new_array(self, element_type: TypeInfo, length: int) -> TypedArray:
        return TypedArray(element_type, [None] * length)
