#!/usr/bin/env python3

"""Reflection provider over in-memory type descriptors.

A Python ``int`` is typed as the configured integer type when its value
fits, otherwise as the narrowest wider integral type that holds it, so
``2**40`` is an ``Int64`` under the default ``Int32`` mapping. Values too
large for every integral type keep the configured type.
"""

import threading
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from ...domain.errors import NoMatchingConstructorError
from ...domain.models.reflection import (
    BOOLEAN,
    DECIMAL,
    DOUBLE,
    INT32,
    OBJECT,
    STRING,
    ConstructorInfo,
    TypedArray,
    TypedValue,
    TypeInfo,
    fits_in,
    unwrap_arguments,
    wider_integer_types,
)
from ...domain.services import ReflectionProvider
from ..logging import get_logger

logger = get_logger(__name__)

# Python scalars whose subclasses keep the scalar's runtime type
SCALAR_CLASSES: tuple[type, ...] = (bool, int, float, Decimal, str)


class MetadataReflectionProvider(ReflectionProvider):
    """Serves constructors declared on ``TypeInfo`` descriptors.

    Python values are typed through a class registry: scalars map to the
    built-in descriptors (``int`` to ``int_type`` or a wider integral type
    for values out of its range, ``float`` to ``float_type``), ``TypedValue``
    and ``TypedArray`` carry their own descriptor, and anything unregistered
    is an ``Object``.

    Attributes:
        int_type: Descriptor used for Python ``int`` values
        float_type: Descriptor used for Python ``float`` values
    """

    def __init__(self, int_type: TypeInfo = INT32, float_type: TypeInfo = DOUBLE):
        self.int_type = int_type
        self.float_type = float_type
        self._integer_types = (int_type, *wider_integer_types(int_type))
        self._lock = threading.RLock()
        # Classes whose descriptor is registered but still being filled in
        self._pending: set[type] = set()
        self._known_types: dict[type, TypeInfo] = {
            bool: BOOLEAN,
            int: int_type,
            float: float_type,
            Decimal: DECIMAL,
            str: STRING,
            object: OBJECT,
        }

    def register(self, python_type: type, type_info: TypeInfo) -> None:
        """Make values of ``python_type`` resolve as ``type_info``."""
        with self._lock:
            self._known_types[python_type] = type_info
        logger.debug(f"Registered {python_type.__qualname__} as {type_info}")

    def type_for_class(self, python_type: type) -> TypeInfo:
        """Get the descriptor used for values of ``python_type``."""
        known = self._known_types.get(python_type)
        if known is not None and python_type not in self._pending:
            return known

        for klass in python_type.__mro__[1:]:
            if klass in SCALAR_CLASSES:
                return self._known_types[klass]
        return self._describe_unknown(python_type)

    def integer_type_for(self, value: int) -> TypeInfo:
        """Get the narrowest configured-or-wider integral type holding ``value``."""
        for candidate in self._integer_types:
            if fits_in(candidate.type_code, value):
                return candidate
        return self.int_type

    def _describe_unknown(self, python_type: type) -> TypeInfo:
        return OBJECT

    def get_constructors(self, type_info: TypeInfo) -> Sequence[ConstructorInfo]:
        return tuple(type_info.constructors)

    def invoke(self, constructor: ConstructorInfo, arguments: Sequence[Any]) -> Any:
        if constructor.invoker is None:
            raise TypeError(f"Constructor {constructor} has no invoker")
        return constructor.invoker(*unwrap_arguments(arguments))

    def runtime_type_of(self, value: Any) -> TypeInfo | None:
        if value is None:
            return None
        if isinstance(value, TypedValue):
            return value.type_info
        if isinstance(value, TypedArray):
            return value.array_type
        if type(value) is int:
            return self.integer_type_for(value)
        return self.type_for_class(type(value))

    def create_default(self, type_info: TypeInfo) -> Any:
        for constructor in self.get_constructors(type_info):
            if not self.get_parameters(constructor):
                return self.invoke(constructor, ())

        raise NoMatchingConstructorError(f"No parameterless constructor defined for {type_info}")
