#!/usr/bin/env python3

"""Parameter information model for constructor reflection."""

from __future__ import annotations

from dataclasses import dataclass

from .type_info import TypeInfo


@dataclass(frozen=True)
class ParameterInfo:
    """Information about a constructor parameter."""

    name: str
    parameter_type: TypeInfo
    position: int
    is_param_array: bool = False  # trailing catch-all slot taking a variable-length tail
