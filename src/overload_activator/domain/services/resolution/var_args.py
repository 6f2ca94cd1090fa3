#!/usr/bin/env python3

"""Materialisation of the variadic tail."""

from collections.abc import Callable, Sequence
from typing import Any

from ...models.reflection import TypedArray, TypeInfo, Variadic

ArrayAllocator = Callable[[TypeInfo, int], TypedArray]


def _allocate(element_type: TypeInfo, length: int) -> TypedArray:
    return TypedArray(element_type, [None] * length)


def build_var_args_array(
    element_type: TypeInfo,
    source: Sequence[Any],
    length: int,
    new_array: ArrayAllocator = _allocate,
) -> TypedArray:
    """Allocate the variadic array and copy ``source`` into it.

    Args:
        element_type: Element type of the variadic parameter
        source: Trailing arguments, in order
        length: Target length (negative lengths are clamped to 0)
        new_array: Allocator taking (element type, length)

    Returns:
        Array of ``element_type`` holding the first ``length`` source items
    """
    length = max(0, length)
    array = new_array(element_type, length)
    array[:length] = source[:length]
    return array


def flatten_var_args(
    arguments: Sequence[Any],
    candidate: Variadic,
    new_array: ArrayAllocator = _allocate,
) -> list[Any]:
    """Build the argument vector for a variadic constructor.

    The vector has one slot per parameter: leading arguments are copied
    positionally and the last slot receives a new array holding the tail.
    """
    element_type = candidate.element_type
    if element_type is None:
        raise TypeError(f"Variadic parameter of {candidate.constructor} is not an array")

    fixed_count = len(candidate.fixed_parameters)
    result: list[Any] = list(arguments[:fixed_count])
    result.append(
        build_var_args_array(
            element_type, arguments[fixed_count:], len(arguments) - fixed_count, new_array
        )
    )
    return result
