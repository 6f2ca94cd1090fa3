#!/usr/bin/env python3

"""Constructor information model for constructor reflection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .parameter_info import ParameterInfo

if TYPE_CHECKING:
    from .type_info import TypeInfo


@dataclass(frozen=True, eq=False)
class ConstructorInfo:
    """Information about one constructor of a type."""

    declaring_type: TypeInfo
    parameters: tuple[ParameterInfo, ...]
    invoker: Callable[..., Any] | None = field(default=None, repr=False)
    """Receives the argument vector unpacked positionally"""

    def __post_init__(self) -> None:
        for parameter in self.parameters[:-1]:
            if parameter.is_param_array:
                raise ValueError(
                    f"Only the last parameter of a {self.declaring_type} constructor "
                    f"can be variadic, got '{parameter.name}' at position {parameter.position}"
                )

    def __str__(self) -> str:
        rendered = []
        for parameter in self.parameters:
            prefix = "params " if parameter.is_param_array else ""
            rendered.append(f"{prefix}{parameter.parameter_type.name} {parameter.name}")
        return f"{self.declaring_type.name}({', '.join(rendered)})"

    @classmethod
    def create(
        cls,
        declaring_type: TypeInfo,
        parameter_types: Sequence[TypeInfo],
        invoker: Callable[..., Any] | None = None,
        *,
        param_array: bool = False,
        parameter_names: Sequence[str] | None = None,
    ) -> ConstructorInfo:
        """Build a constructor from its parameter types.

        Args:
            declaring_type: Type the constructor belongs to
            parameter_types: Declared type of each parameter, in order
            invoker: Called with the built argument vector
            param_array: Mark the last parameter as the variadic slot
            parameter_names: Optional names, one per parameter

        Returns:
            The constructor descriptor (not registered on the type)
        """
        if parameter_names is None:
            parameter_names = [f"arg{index}" for index in range(len(parameter_types))]
        elif len(parameter_names) != len(parameter_types):
            raise ValueError("parameter_names must name every parameter")
        if param_array and not parameter_types:
            raise ValueError("A variadic constructor needs at least one parameter")

        last = len(parameter_types) - 1
        parameters = tuple(
            ParameterInfo(
                name=name,
                parameter_type=parameter_type,
                position=index,
                is_param_array=param_array and index == last,
            )
            for index, (name, parameter_type) in enumerate(zip(parameter_names, parameter_types))
        )
        return cls(declaring_type, parameters, invoker)

    def get_parameters(self) -> tuple[ParameterInfo, ...]:
        return self.parameters

    def get_parameter_types(self) -> tuple[TypeInfo, ...]:
        return tuple(parameter.parameter_type for parameter in self.parameters)
