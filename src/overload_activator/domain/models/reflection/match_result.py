#!/usr/bin/env python3

"""Candidate classification and match accumulation results."""

from __future__ import annotations

from dataclasses import dataclass

from .constructor_info import ConstructorInfo
from .parameter_info import ParameterInfo
from .type_info import TypeInfo


@dataclass(frozen=True)
class FixedArity:
    """Candidate whose arguments must match its parameters one-to-one."""

    constructor: ConstructorInfo
    parameters: tuple[ParameterInfo, ...]


@dataclass(frozen=True)
class Variadic:
    """Candidate whose last parameter absorbs the trailing arguments."""

    constructor: ConstructorInfo
    parameters: tuple[ParameterInfo, ...]

    @property
    def fixed_parameters(self) -> tuple[ParameterInfo, ...]:
        return self.parameters[:-1]

    @property
    def element_type(self) -> TypeInfo | None:
        """Element type of the variadic slot; None if the slot is not an array."""
        return self.parameters[-1].parameter_type.get_element_type()


CandidateShape = FixedArity | Variadic


@dataclass(frozen=True)
class NoMatch:
    pass


@dataclass(frozen=True)
class OneMatch:
    candidate: CandidateShape


@dataclass(frozen=True)
class Ambiguous:
    first: CandidateShape
    second: CandidateShape


MatchResult = NoMatch | OneMatch | Ambiguous


def accumulate(result: MatchResult, candidate: CandidateShape) -> MatchResult:
    """Fold one compatible candidate into the running result.

    Ambiguity is absorbing: once two candidates matched, further matches
    do not change the outcome.
    """
    if isinstance(result, NoMatch):
        return OneMatch(candidate)
    if isinstance(result, OneMatch):
        return Ambiguous(result.candidate, candidate)
    return result
