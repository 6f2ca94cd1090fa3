#!/usr/bin/env python3

"""Constructor overload resolution and invocation.

Given a type and a runtime argument list, this module picks the single
constructor able to accept the arguments and invokes it:

- each candidate is classified as fixed-arity or variadic,
- compatibility is a pure predicate over the argument type vector,
- matches are folded into NoMatch / OneMatch / Ambiguous,
- a variadic winner gets its trailing arguments packed into a new array.

Candidates are first matched without numeric widening; widening is only
tried when nothing matches exactly, so ``(Int32)`` beats ``(Int64)`` for an Int32
argument. Within a pass any tie is an error. There is no "most specific
wins" ranking, so a fixed-arity and a variadic constructor that both accept
the arguments make the call ambiguous.
"""

from collections.abc import Sequence
from typing import Any

from ....infrastructure.logging import get_logger
from ...errors import AmbiguousMatchError, InvalidArgumentError, NoMatchingConstructorError
from ...models.reflection import (
    Ambiguous,
    CandidateShape,
    ConstructorInfo,
    FixedArity,
    MatchResult,
    NoMatch,
    TypeInfo,
    Variadic,
    accumulate,
)
from ..reflection_provider import ReflectionProvider
from .compatibility import is_compatible
from .var_args import flatten_var_args

logger = get_logger(__name__)


class ConstructorResolver:
    """Resolves and invokes constructors through a reflection provider.

    Holds no per-call state, so one resolver can serve concurrent callers.

    Attributes:
        provider: Reflection facility used for every type-system query
    """

    def __init__(self, provider: ReflectionProvider):
        self.provider = provider

    def resolve(self, type_info: TypeInfo | None, args: Sequence[Any] | None = None) -> Any:
        """Construct an instance of ``type_info`` from ``args``.

        Args:
            type_info: Type to construct
            args: Constructor arguments; None or empty selects the zero-argument path

        Returns:
            The newly constructed instance

        Raises:
            InvalidArgumentError: If ``type_info`` is None
            AmbiguousMatchError: If several constructors accept the arguments
            NoMatchingConstructorError: If no constructor accepts the arguments
        """
        if type_info is None:
            raise InvalidArgumentError("type must not be None")

        if not args:
            logger.debug(f"Using zero-argument construction for {type_info}")
            return self.provider.create_default(type_info)

        argument_types = self.argument_types_of(args)
        candidate = self.select(type_info, argument_types)
        arguments = self.build_arguments(candidate, args)

        logger.debug(f"Invoking {candidate.constructor}")
        return self.provider.invoke(candidate.constructor, arguments)

    def argument_types_of(self, args: Sequence[Any]) -> tuple[TypeInfo | None, ...]:
        return tuple(self.provider.runtime_type_of(arg) for arg in args)

    def classify(self, constructor: ConstructorInfo) -> CandidateShape | None:
        """Classify a constructor as fixed-arity or variadic.

        Returns:
            The candidate shape, or None for parameterless constructors,
            which the search never considers
        """
        parameters = tuple(self.provider.get_parameters(constructor))
        if not parameters:
            return None

        if self.provider.is_variadic_marker(parameters[-1]):
            return Variadic(constructor, parameters)
        return FixedArity(constructor, parameters)

    def find_match(
        self,
        type_info: TypeInfo,
        argument_types: Sequence[TypeInfo | None],
        allow_widening: bool = True,
    ) -> MatchResult:
        """Fold every compatible candidate of ``type_info`` into a match result."""
        result: MatchResult = NoMatch()
        for constructor in self.provider.get_constructors(type_info):
            candidate = self.classify(constructor)
            if candidate is None or not is_compatible(candidate, argument_types, allow_widening):
                continue

            logger.debug(f"Compatible candidate: {constructor}")
            result = accumulate(result, candidate)
            if isinstance(result, Ambiguous):
                break
        return result

    def select(
        self, type_info: TypeInfo, argument_types: Sequence[TypeInfo | None]
    ) -> CandidateShape:
        """Pick the unique compatible candidate or raise."""
        result = self.find_match(type_info, argument_types, allow_widening=False)
        if isinstance(result, NoMatch):
            logger.debug(f"No exact match on {type_info}, retrying with numeric widening")
            result = self.find_match(type_info, argument_types, allow_widening=True)

        if isinstance(result, Ambiguous):
            raise AmbiguousMatchError(
                f"Ambiguous match found calling constructor of {type_info}: "
                f"{result.first.constructor} and {result.second.constructor}"
            )
        if isinstance(result, NoMatch):
            rendered = ", ".join(
                "null" if argument_type is None else argument_type.name
                for argument_type in argument_types
            )
            raise NoMatchingConstructorError(
                f"No matching constructor was found on {type_info} for ({rendered})"
            )
        return result.candidate

    def build_arguments(self, candidate: CandidateShape, args: Sequence[Any]) -> list[Any]:
        """Build the exact argument vector for the winning candidate."""
        if isinstance(candidate, Variadic):
            return flatten_var_args(args, candidate, self.provider.new_array)
        return list(args)
