#!/usr/bin/env python3

"""Type codes and numeric widening rules.

Type codes classify the built-in value types the same way across every
provider. Their numeric ordering matters: the widening table below is
expressed as contiguous code ranges, so the values must not be renumbered.
"""

from enum import IntEnum


class TypeCode(IntEnum):
    """Coarse classification of a runtime type."""

    EMPTY = 0
    OBJECT = 1
    DB_NULL = 2
    BOOLEAN = 3
    CHAR = 4
    SBYTE = 5
    BYTE = 6
    INT16 = 7
    UINT16 = 8
    INT32 = 9
    UINT32 = 10
    INT64 = 11
    UINT64 = 12
    SINGLE = 13
    DOUBLE = 14
    DECIMAL = 15
    DATE_TIME = 16
    STRING = 18


def _code_range(first: TypeCode, last: TypeCode) -> frozenset[TypeCode]:
    return frozenset(code for code in TypeCode if first <= code <= last)


# Target type code -> argument type codes that widen into it
WIDENING_SOURCES: dict[TypeCode, frozenset[TypeCode]] = {
    TypeCode.BOOLEAN: frozenset(),
    TypeCode.CHAR: frozenset(),
    TypeCode.SBYTE: frozenset(),
    TypeCode.BYTE: frozenset({TypeCode.SBYTE}),
    TypeCode.INT16: frozenset({TypeCode.SBYTE, TypeCode.BYTE}),
    TypeCode.UINT16: frozenset({TypeCode.SBYTE, TypeCode.BYTE}),
    TypeCode.INT32: _code_range(TypeCode.SBYTE, TypeCode.UINT16),
    TypeCode.UINT32: _code_range(TypeCode.SBYTE, TypeCode.UINT16),
    TypeCode.INT64: _code_range(TypeCode.SBYTE, TypeCode.UINT32),
    TypeCode.UINT64: _code_range(TypeCode.SBYTE, TypeCode.UINT32),
    TypeCode.SINGLE: _code_range(TypeCode.SBYTE, TypeCode.UINT64),
    TypeCode.DOUBLE: _code_range(TypeCode.SBYTE, TypeCode.SINGLE),
    TypeCode.DECIMAL: _code_range(TypeCode.SBYTE, TypeCode.DOUBLE),
}

NUMERIC_TYPE_CODES = _code_range(TypeCode.SBYTE, TypeCode.DECIMAL)


def widens_to(source: TypeCode, target: TypeCode) -> bool:
    """Check whether a value of ``source`` widens implicitly into ``target``.

    Args:
        source: Type code of the argument
        target: Type code of the declared parameter

    Returns:
        True if the widening table allows the conversion
    """
    return source in WIDENING_SOURCES.get(target, frozenset())


# Inclusive value range of each integral type code
INTEGER_RANGES: dict[TypeCode, tuple[int, int]] = {
    TypeCode.SBYTE: (-(2**7), 2**7 - 1),
    TypeCode.BYTE: (0, 2**8 - 1),
    TypeCode.INT16: (-(2**15), 2**15 - 1),
    TypeCode.UINT16: (0, 2**16 - 1),
    TypeCode.INT32: (-(2**31), 2**31 - 1),
    TypeCode.UINT32: (0, 2**32 - 1),
    TypeCode.INT64: (-(2**63), 2**63 - 1),
    TypeCode.UINT64: (0, 2**64 - 1),
}


def fits_in(type_code: TypeCode, value: int) -> bool:
    """Check whether ``value`` is representable by an integral type code."""
    bounds = INTEGER_RANGES.get(type_code)
    if bounds is None:
        return False
    low, high = bounds
    return low <= value <= high
