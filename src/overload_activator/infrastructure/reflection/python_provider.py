#!/usr/bin/env python3

"""Reflection provider describing native Python classes.

A class declares its overload set by decorating initialisers with
``@constructor``::

    class Span:
        @constructor
        def from_length(self, length: int) -> None: ...

        @constructor
        def from_bounds(self, start: int, *rest: int) -> None: ...

A class without decorated initialisers exposes ``__init__`` as its only
constructor, or ``__new__`` when only that is overridden (namedtuples,
``fractions.Fraction``). Positional parameters become constructor parameters and
``*args`` becomes the variadic slot, typed as an array of its annotation.
Keyword-only parameters and ``**kwargs`` are not modelled.
"""

import inspect
import types
import typing
from collections.abc import Callable
from typing import Any, TypeVar

from ...domain.errors import NoMatchingConstructorError
from ...domain.models.reflection import (
    OBJECT,
    ConstructorInfo,
    TypeInfo,
    TypedArray,
)
from ..logging import get_logger
from .metadata_provider import MetadataReflectionProvider

logger = get_logger(__name__)

CONSTRUCTOR_MARKER = "__overload_constructor__"

F = TypeVar("F", bound=Callable[..., Any])


def constructor(func: F) -> F:
    """Mark a method as one constructor of its class's overload set."""
    setattr(func, CONSTRUCTOR_MARKER, True)
    return func


def is_constructor(member: Any) -> bool:
    return callable(member) and getattr(member, CONSTRUCTOR_MARKER, False) is True


class PythonReflectionProvider(MetadataReflectionProvider):
    """Describes Python classes as ``TypeInfo`` descriptors on first use.

    Descriptions are cached per class, so a class always maps to the same
    descriptor and identity comparisons keep working.
    """

    def describe(self, type_: Any) -> TypeInfo:
        if isinstance(type_, TypeInfo):
            return type_
        if isinstance(type_, type):
            return self.type_for_class(type_)
        raise TypeError(f"Cannot describe {type_!r}: expected a class or TypeInfo")

    def create_default(self, type_info: TypeInfo) -> Any:
        """Use a parameterless constructor, else call the class with no arguments.

        Classes with an ``@constructor`` overload set never fall back to the
        plain call, and neither do classes whose ``__init__`` needs arguments.
        """
        python_type = type_info.python_type
        if python_type is None or _declares_constructors(python_type):
            return super().create_default(type_info)

        for ctor in self.get_constructors(type_info):
            if not self.get_parameters(ctor):
                return self.invoke(ctor, ())
        if not _accepts_no_arguments(python_type):
            raise NoMatchingConstructorError(
                f"No parameterless constructor defined for {type_info}"
            )
        return python_type()

    def _describe_unknown(self, python_type: type) -> TypeInfo:
        with self._lock:
            known = self._known_types.get(python_type)
            if known is not None:
                return known

            base_classes = [klass for klass in python_type.__mro__[1:] if klass is not object]
            primary_base = python_type.__bases__[0]
            base_type = OBJECT if primary_base is object else self.type_for_class(primary_base)
            chain = set(base_type.iter_base_types()) | {base_type}

            type_info = TypeInfo(
                name=python_type.__qualname__,
                namespace=python_type.__module__,
                base_type=base_type,
                python_type=python_type,
            )
            # Registered before constructors are read so self-references resolve;
            # other threads wait on the lock until the descriptor is complete
            self._pending.add(python_type)
            self._known_types[python_type] = type_info

            try:
                type_info.interfaces = tuple(
                    self.type_for_class(klass)
                    for klass in base_classes
                    if klass not in _python_types_of(chain)
                )
                type_info.constructors.extend(
                    self._describe_constructors(python_type, type_info)
                )
            except TypeError:
                del self._known_types[python_type]
                raise
            finally:
                self._pending.discard(python_type)

        logger.debug(
            f"Described {type_info} with {len(type_info.constructors)} constructor(s)"
        )
        return type_info

    def _describe_constructors(
        self, python_type: type, type_info: TypeInfo
    ) -> list[ConstructorInfo]:
        initialisers = _declared_initialisers(python_type)
        if initialisers:
            return [
                self._describe_initialiser(python_type, type_info, initialiser)
                for initialiser in initialisers
            ]

        if python_type.__init__ is not object.__init__:
            initialiser = python_type.__init__
        elif python_type.__new__ is not object.__new__:
            # Immutable classes (namedtuples, Fraction) take their arguments in __new__
            initialiser = python_type.__new__
        else:
            return [ConstructorInfo.create(type_info, (), python_type)]

        try:
            return [self._describe_call(python_type, type_info, initialiser)]
        except ValueError:
            logger.debug(
                f"No signature available for {python_type.__qualname__}.{initialiser.__name__}"
            )
            return []

    def _describe_initialiser(
        self, python_type: type, type_info: TypeInfo, initialiser: Callable[..., Any]
    ) -> ConstructorInfo:
        parameter_types, names, variadic = self._read_signature(initialiser)

        def invoke(*arguments: Any) -> Any:
            instance = python_type.__new__(python_type)
            initialiser(instance, *_spread(arguments, variadic))
            return instance

        return ConstructorInfo.create(
            type_info, parameter_types, invoke, param_array=variadic, parameter_names=names
        )

    def _describe_call(
        self, python_type: type, type_info: TypeInfo, initialiser: Callable[..., Any]
    ) -> ConstructorInfo:
        """Describe ``initialiser``'s signature, invoking by calling the class."""
        parameter_types, names, variadic = self._read_signature(initialiser)

        def invoke(*arguments: Any) -> Any:
            return python_type(*_spread(arguments, variadic))

        return ConstructorInfo.create(
            type_info, parameter_types, invoke, param_array=variadic, parameter_names=names
        )

    def _read_signature(
        self, func: Callable[..., Any]
    ) -> tuple[list[TypeInfo], list[str], bool]:
        """Read parameter types and names of an initialiser, skipping ``self`` or ``cls``.

        Returns:
            (parameter types, parameter names, whether the last one is variadic)
        """
        try:
            signature = inspect.signature(func, eval_str=True)
        except NameError as e:
            raise TypeError(f"Cannot resolve annotations of {func.__qualname__}: {e}") from e

        parameter_types: list[TypeInfo] = []
        names: list[str] = []
        variadic = False
        for parameter in list(signature.parameters.values())[1:]:
            if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
                parameter_types.append(self.annotation_type(parameter.annotation))
                names.append(parameter.name)
            elif parameter.kind is parameter.VAR_POSITIONAL:
                element_type = self.annotation_type(parameter.annotation)
                parameter_types.append(element_type.make_array_type())
                names.append(parameter.name)
                variadic = True
        return parameter_types, names, variadic

    def annotation_type(self, annotation: Any) -> TypeInfo:
        """Map a parameter annotation to a descriptor.

        Optional value types become ``Nullable<T>``; other unions, ``Any``
        and missing annotations become ``Object``.
        """
        if annotation is inspect.Parameter.empty or annotation is None or annotation is Any:
            return OBJECT
        if isinstance(annotation, TypeInfo):
            return annotation

        origin = typing.get_origin(annotation)
        if origin is typing.Union or origin is types.UnionType:
            members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                return OBJECT
            member_type = self.annotation_type(members[0])
            if member_type.is_value_type and not member_type.is_nullable:
                return member_type.make_nullable_type()
            return member_type
        if origin is not None:
            return self.annotation_type(origin)

        if isinstance(annotation, type):
            return self.type_for_class(annotation)
        raise TypeError(f"Unsupported parameter annotation: {annotation!r}")


def _declared_initialisers(python_type: type) -> list[Callable[..., Any]]:
    return [member for member in vars(python_type).values() if is_constructor(member)]


def _declares_constructors(python_type: type) -> bool:
    return bool(_declared_initialisers(python_type))


def _accepts_no_arguments(python_type: type) -> bool:
    try:
        inspect.signature(python_type).bind()
    except (TypeError, ValueError):
        return False
    return True


def _python_types_of(type_infos: set[TypeInfo]) -> set[type]:
    return {type_info.python_type for type_info in type_infos if type_info.python_type is not None}


def _spread(arguments: tuple[Any, ...], variadic: bool) -> list[Any]:
    """Unpack the trailing variadic array back into positional arguments."""
    if not variadic:
        return list(arguments)
    tail = arguments[-1]
    assert isinstance(tail, TypedArray)
    return [*arguments[:-1], *tail]
