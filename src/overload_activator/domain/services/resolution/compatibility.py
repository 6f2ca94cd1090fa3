#!/usr/bin/env python3

"""Argument-to-parameter compatibility rules.

Pure predicates: nothing here touches the provider or allocates.
"""

from collections.abc import Sequence

from ...models.reflection import (
    DECIMAL,
    CandidateShape,
    FixedArity,
    ParameterInfo,
    TypeInfo,
    widens_to,
)


def is_type_assignable_from(
    declared: TypeInfo, argument_type: TypeInfo | None, allow_widening: bool = True
) -> bool:
    """Check whether an argument of ``argument_type`` can bind to ``declared``.

    Args:
        declared: Declared parameter type
        argument_type: Runtime type of the argument, None for a null value
        allow_widening: Whether numeric widening may be used

    Returns:
        True on identity, null into a reference or Nullable<T> type,
        platform assignability, or numeric widening
    """
    if declared is argument_type:
        return True

    if argument_type is None:
        if not declared.is_value_type:
            return True
        return declared.is_nullable

    if declared.is_assignable_from(argument_type):
        return True

    if not allow_widening:
        return False

    if not declared.is_primitive and declared is not DECIMAL:
        return False

    return widens_to(argument_type.type_code, declared.type_code)


def parameters_match(
    parameters: Sequence[ParameterInfo],
    argument_types: Sequence[TypeInfo | None],
    allow_widening: bool = True,
) -> bool:
    """Fixed-arity test: same count, every position assignable."""
    if len(parameters) != len(argument_types):
        return False

    return all(
        is_type_assignable_from(parameter.parameter_type, argument_type, allow_widening)
        for parameter, argument_type in zip(parameters, argument_types)
    )


def variable_parameters_match(
    parameters: Sequence[ParameterInfo],
    argument_types: Sequence[TypeInfo | None],
    allow_widening: bool = True,
) -> bool:
    """Variadic test: leading parameters pairwise, then each tail argument
    against the element type.
    """
    fixed_count = len(parameters) - 1
    if len(argument_types) < fixed_count:
        return False

    # A variadic marker on a non-array parameter never matches
    element_type = parameters[-1].parameter_type.get_element_type()
    if element_type is None:
        return False

    if not parameters_match(
        parameters[:fixed_count], argument_types[:fixed_count], allow_widening
    ):
        return False

    return all(
        is_type_assignable_from(element_type, argument_type, allow_widening)
        for argument_type in argument_types[fixed_count:]
    )


def is_compatible(
    candidate: CandidateShape,
    argument_types: Sequence[TypeInfo | None],
    allow_widening: bool = True,
) -> bool:
    if isinstance(candidate, FixedArity):
        return parameters_match(candidate.parameters, argument_types, allow_widening)
    return variable_parameters_match(candidate.parameters, argument_types, allow_widening)
