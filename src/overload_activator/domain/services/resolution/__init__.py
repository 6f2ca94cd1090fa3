#!/usr/bin/env python3

"""Constructor resolution services."""

from .compatibility import (
    is_compatible,
    is_type_assignable_from,
    parameters_match,
    variable_parameters_match,
)
from .constructor_resolver import ConstructorResolver
from .var_args import build_var_args_array, flatten_var_args

__all__ = [
    "ConstructorResolver",
    "build_var_args_array",
    "flatten_var_args",
    "is_compatible",
    "is_type_assignable_from",
    "parameters_match",
    "variable_parameters_match",
]
