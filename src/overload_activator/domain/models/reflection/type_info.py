#!/usr/bin/env python3

"""Type descriptor model.

A ``TypeInfo`` is an opaque handle to a runtime type. Descriptors compare by
identity, so constructed types (arrays, generic instantiations) are interned
on the descriptor they were built from: asking twice for ``Int32[]`` yields
the same object.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .type_codes import TypeCode

if TYPE_CHECKING:
    from .constructor_info import ConstructorInfo

_intern_lock = threading.Lock()


@dataclass(eq=False)
class TypeInfo:
    """Information about a runtime type."""

    name: str
    namespace: str = ""
    type_code: TypeCode = TypeCode.OBJECT
    is_value_type: bool = False
    is_primitive: bool = False
    is_interface: bool = False
    base_type: TypeInfo | None = None
    interfaces: tuple[TypeInfo, ...] = ()
    element_type: TypeInfo | None = None
    array_rank: int = 0
    generic_definition: TypeInfo | None = None
    generic_arguments: tuple[TypeInfo, ...] = ()
    generic_parameter_count: int = 0
    constructors: list[ConstructorInfo] = field(default_factory=list, repr=False)
    python_type: type | None = field(default=None, repr=False)
    """Native class this descriptor was built from, if any"""

    _array_types: dict[int, TypeInfo] = field(default_factory=dict, init=False, repr=False)
    _instantiations: dict[tuple[TypeInfo, ...], TypeInfo] = field(
        default_factory=dict, init=False, repr=False
    )

    def __str__(self) -> str:
        return self.full_name

    @property
    def full_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    @property
    def is_array(self) -> bool:
        return self.array_rank > 0

    @property
    def is_generic_type(self) -> bool:
        return self.generic_parameter_count > 0 or self.generic_definition is not None

    @property
    def is_generic_type_definition(self) -> bool:
        return self.generic_parameter_count > 0 and self.generic_definition is None

    @property
    def is_nullable(self) -> bool:
        """True for instantiations of ``Nullable<T>``."""
        return self.is_generic_instance_of(NULLABLE)

    def get_element_type(self) -> TypeInfo | None:
        return self.element_type

    def get_generic_type_definition(self) -> TypeInfo:
        """Get the open generic type this type was instantiated from.

        Raises:
            TypeError: If the type is not generic
        """
        if self.generic_definition is not None:
            return self.generic_definition
        if self.is_generic_type_definition:
            return self
        raise TypeError(f"{self.full_name} is not a generic type")

    def get_generic_arguments(self) -> tuple[TypeInfo, ...]:
        return self.generic_arguments

    def is_generic_instance_of(self, definition: TypeInfo) -> bool:
        return self.generic_definition is not None and self.generic_definition is definition

    def get_not_nullable_type(self) -> TypeInfo:
        """Strip a ``Nullable<T>`` wrapper, returning ``T``; other types are returned as-is."""
        return self.generic_arguments[0] if self.is_nullable else self

    def make_nullable_type(self) -> TypeInfo:
        return NULLABLE.make_generic_type(self)

    def make_generic_type(self, *arguments: TypeInfo) -> TypeInfo:
        """Instantiate a generic type definition.

        Args:
            *arguments: One type argument per generic parameter

        Returns:
            The interned instantiation

        Raises:
            TypeError: If this type is not a generic type definition
            ValueError: If the argument count is wrong or a constraint is violated
        """
        if not self.is_generic_type_definition:
            raise TypeError(f"{self.full_name} is not a generic type definition")
        if len(arguments) != self.generic_parameter_count:
            raise ValueError(
                f"{self.full_name} takes {self.generic_parameter_count} type argument(s), "
                f"got {len(arguments)}"
            )
        if self is NULLABLE and (not arguments[0].is_value_type or arguments[0].is_nullable):
            raise ValueError(f"Nullable<T> requires a non-nullable value type, got {arguments[0]}")

        with _intern_lock:
            instantiation = self._instantiations.get(arguments)
            if instantiation is None:
                argument_names = ", ".join(argument.name for argument in arguments)
                instantiation = TypeInfo(
                    name=f"{self.name}<{argument_names}>",
                    namespace=self.namespace,
                    type_code=self.type_code,
                    is_value_type=self.is_value_type,
                    is_interface=self.is_interface,
                    base_type=self.base_type,
                    interfaces=self.interfaces,
                    generic_definition=self,
                    generic_arguments=tuple(arguments),
                )
                self._instantiations[arguments] = instantiation
        return instantiation

    def make_array_type(self, rank: int = 1) -> TypeInfo:
        """Get the array type whose elements are of this type.

        Args:
            rank: Number of array dimensions

        Returns:
            The interned array type, named ``T[]`` (``T[,]`` for rank 2, ...)
        """
        if rank < 1:
            raise ValueError(f"Array rank must be positive, got {rank}")

        with _intern_lock:
            array_type = self._array_types.get(rank)
            if array_type is None:
                array_type = TypeInfo(
                    name=f"{self.name}[{',' * (rank - 1)}]",
                    namespace=self.namespace,
                    base_type=ARRAY,
                    element_type=self,
                    array_rank=rank,
                )
                self._array_types[rank] = array_type
        return array_type

    def iter_base_types(self) -> Iterator[TypeInfo]:
        """Yield the base type chain, nearest first."""
        current = self.base_type
        while current is not None:
            yield current
            current = current.base_type

    def is_subclass_of(self, other: TypeInfo) -> bool:
        return any(base is other for base in self.iter_base_types())

    def implements(self, interface: TypeInfo) -> bool:
        """Check whether this type or one of its bases implements ``interface``."""
        pending = list(self.interfaces)
        for base in self.iter_base_types():
            pending.extend(base.interfaces)

        seen: set[int] = set()
        while pending:
            candidate = pending.pop()
            if candidate is interface:
                return True
            if id(candidate) in seen:
                continue
            seen.add(id(candidate))
            pending.extend(candidate.interfaces)
        return False

    def is_assignable_from(self, other: TypeInfo | None) -> bool:
        """Check whether a value of type ``other`` can be stored in this type.

        Covers identity, subclassing, interface implementation, the object
        root, ``Nullable<T>`` from ``T`` and array covariance over reference
        element types.
        """
        if other is None:
            return False
        if other is self or self is OBJECT:
            return True
        if other.is_subclass_of(self):
            return True
        if other.implements(self):
            return True
        if self.is_nullable and self.generic_arguments[0] is other:
            return True
        return _array_is_assignable(other, self)

    def is_assignable_to(self, other: TypeInfo) -> bool:
        return other.is_assignable_from(self)

    def define_constructor(
        self,
        parameter_types: Sequence[TypeInfo],
        invoker: Callable[..., Any] | None = None,
        *,
        param_array: bool = False,
        parameter_names: Sequence[str] | None = None,
    ) -> ConstructorInfo:
        """Declare a constructor on this type.

        Args:
            parameter_types: Declared type of each parameter, in order
            invoker: Called with the built argument vector to produce the instance
            param_array: Mark the last parameter as the variadic slot
            parameter_names: Optional parameter names (defaults to arg0, arg1, ...)

        Returns:
            The new constructor, already registered on this type
        """
        from .constructor_info import ConstructorInfo

        constructor = ConstructorInfo.create(
            self,
            parameter_types,
            invoker,
            param_array=param_array,
            parameter_names=parameter_names,
        )
        self.constructors.append(constructor)
        return constructor


def _array_is_assignable(source: TypeInfo, target: TypeInfo) -> bool:
    if not (source.is_array and target.is_array) or source.array_rank != target.array_rank:
        return False
    source_element = source.element_type
    target_element = target.element_type
    assert source_element is not None and target_element is not None
    if source_element.is_value_type:
        return source_element is target_element
    return target_element.is_assignable_from(source_element)


# Root descriptors. Every other built-in lives in builtin_types.
OBJECT = TypeInfo("Object", "System")
VALUE_TYPE = TypeInfo("ValueType", "System", base_type=OBJECT)
ARRAY = TypeInfo("Array", "System", base_type=OBJECT)
NULLABLE = TypeInfo(
    "Nullable",
    "System",
    is_value_type=True,
    base_type=VALUE_TYPE,
    generic_parameter_count=1,
)
