#!/usr/bin/env python3

"""Runtime value wrappers that carry an explicit type descriptor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .type_info import TypeInfo


@dataclass(frozen=True)
class TypedValue:
    """A value tagged with the descriptor it should be resolved as.

    Python integers and floats carry no width, so ``TypedValue(3, INT16)``
    is how a caller passes a 16-bit argument.
    """

    value: Any
    type_info: TypeInfo


class TypedArray(list):
    """List whose runtime type is an array of ``element_type``."""

    def __init__(self, element_type: TypeInfo, items: Iterable[Any] = ()):
        super().__init__(items)
        self.element_type = element_type

    def __repr__(self) -> str:
        return f"{self.element_type.name}[]({list.__repr__(self)})"

    @property
    def array_type(self) -> TypeInfo:
        return self.element_type.make_array_type()


def unwrap(value: Any) -> Any:
    """Return the payload of a ``TypedValue``; any other value as-is."""
    return value.value if isinstance(value, TypedValue) else value


def unwrap_arguments(arguments: Iterable[Any]) -> list[Any]:
    """Unwrap every argument of a built vector, including variadic array items."""
    unwrapped = []
    for argument in arguments:
        if isinstance(argument, TypedArray):
            argument = TypedArray(argument.element_type, (unwrap(item) for item in argument))
        unwrapped.append(unwrap(argument))
    return unwrapped
