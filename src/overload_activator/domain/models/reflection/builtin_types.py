#!/usr/bin/env python3

"""Built-in type descriptors.

Mirrors the primitive types every provider agrees on. Roots (Object,
ValueType, Array, Nullable<>) are defined next to ``TypeInfo`` itself.
"""

from .type_codes import TypeCode, widens_to
from .type_info import ARRAY, NULLABLE, OBJECT, VALUE_TYPE, TypeInfo


def _primitive(name: str, type_code: TypeCode) -> TypeInfo:
    return TypeInfo(
        name,
        "System",
        type_code=type_code,
        is_value_type=True,
        is_primitive=True,
        base_type=VALUE_TYPE,
    )


BOOLEAN = _primitive("Boolean", TypeCode.BOOLEAN)
CHAR = _primitive("Char", TypeCode.CHAR)
SBYTE = _primitive("SByte", TypeCode.SBYTE)
BYTE = _primitive("Byte", TypeCode.BYTE)
INT16 = _primitive("Int16", TypeCode.INT16)
UINT16 = _primitive("UInt16", TypeCode.UINT16)
INT32 = _primitive("Int32", TypeCode.INT32)
UINT32 = _primitive("UInt32", TypeCode.UINT32)
INT64 = _primitive("Int64", TypeCode.INT64)
UINT64 = _primitive("UInt64", TypeCode.UINT64)
SINGLE = _primitive("Single", TypeCode.SINGLE)
DOUBLE = _primitive("Double", TypeCode.DOUBLE)

# High-precision decimal is a value type but not a primitive
DECIMAL = TypeInfo(
    "Decimal",
    "System",
    type_code=TypeCode.DECIMAL,
    is_value_type=True,
    base_type=VALUE_TYPE,
)
STRING = TypeInfo("String", "System", type_code=TypeCode.STRING, base_type=OBJECT)

BUILTIN_TYPES: dict[str, TypeInfo] = {
    type_info.name: type_info
    for type_info in (
        OBJECT,
        VALUE_TYPE,
        ARRAY,
        NULLABLE,
        BOOLEAN,
        CHAR,
        SBYTE,
        BYTE,
        INT16,
        UINT16,
        INT32,
        UINT32,
        INT64,
        UINT64,
        SINGLE,
        DOUBLE,
        DECIMAL,
        STRING,
    )
}

INTEGER_TYPE_NAMES = frozenset(
    {"SByte", "Byte", "Int16", "UInt16", "Int32", "UInt32", "Int64", "UInt64"}
)
FLOAT_TYPE_NAMES = frozenset({"Single", "Double", "Decimal"})


def get_builtin_type(name: str) -> TypeInfo:
    """Look up a built-in descriptor by its short name (e.g. ``"Int32"``).

    Raises:
        KeyError: If no built-in type has that name
    """
    try:
        return BUILTIN_TYPES[name]
    except KeyError:
        raise KeyError(f"Unknown built-in type: {name}") from None


def wider_integer_types(type_info: TypeInfo) -> tuple[TypeInfo, ...]:
    """Integral built-ins that ``type_info`` widens into, narrowest first."""
    return tuple(
        sorted(
            (
                BUILTIN_TYPES[name]
                for name in INTEGER_TYPE_NAMES
                if widens_to(type_info.type_code, BUILTIN_TYPES[name].type_code)
            ),
            key=lambda candidate: candidate.type_code,
        )
    )
