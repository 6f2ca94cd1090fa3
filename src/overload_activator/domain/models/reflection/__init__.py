#!/usr/bin/env python3

"""Reflection domain models: type, constructor and parameter descriptors."""

from .builtin_types import (
    BOOLEAN,
    BUILTIN_TYPES,
    BYTE,
    CHAR,
    DECIMAL,
    DOUBLE,
    INT16,
    INT32,
    INT64,
    SBYTE,
    SINGLE,
    STRING,
    UINT16,
    UINT32,
    UINT64,
    get_builtin_type,
    wider_integer_types,
)
from .constructor_info import ConstructorInfo
from .match_result import (
    Ambiguous,
    CandidateShape,
    FixedArity,
    MatchResult,
    NoMatch,
    OneMatch,
    Variadic,
    accumulate,
)
from .parameter_info import ParameterInfo
from .type_codes import (
    INTEGER_RANGES,
    NUMERIC_TYPE_CODES,
    WIDENING_SOURCES,
    TypeCode,
    fits_in,
    widens_to,
)
from .type_info import ARRAY, NULLABLE, OBJECT, VALUE_TYPE, TypeInfo
from .values import TypedArray, TypedValue, unwrap, unwrap_arguments

__all__ = [
    "ARRAY",
    "Ambiguous",
    "BOOLEAN",
    "BUILTIN_TYPES",
    "BYTE",
    "CHAR",
    "CandidateShape",
    "ConstructorInfo",
    "DECIMAL",
    "DOUBLE",
    "FixedArity",
    "INT16",
    "INT32",
    "INT64",
    "INTEGER_RANGES",
    "MatchResult",
    "NULLABLE",
    "NUMERIC_TYPE_CODES",
    "NoMatch",
    "OBJECT",
    "OneMatch",
    "ParameterInfo",
    "SBYTE",
    "SINGLE",
    "STRING",
    "TypeCode",
    "TypeInfo",
    "TypedArray",
    "TypedValue",
    "UINT16",
    "UINT32",
    "UINT64",
    "VALUE_TYPE",
    "Variadic",
    "WIDENING_SOURCES",
    "accumulate",
    "fits_in",
    "get_builtin_type",
    "unwrap",
    "unwrap_arguments",
    "widens_to",
    "wider_integer_types",
]
