"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from overload_activator.application import Activator
from overload_activator.domain.models.reflection import TypeInfo
from overload_activator.domain.services.resolution import ConstructorResolver
from overload_activator.infrastructure.logging import LoggerSetup
from overload_activator.infrastructure.reflection import MetadataReflectionProvider


@dataclass
class Constructed:
    """Instance produced by a fixture constructor: which one ran, and with what."""

    label: str
    arguments: tuple[Any, ...]


def recording_invoker(label: str) -> Callable[..., Constructed]:
    def invoke(*arguments: Any) -> Constructed:
        return Constructed(label, arguments)

    return invoke


TypeFactory = Callable[..., TypeInfo]


@pytest.fixture
def make_type() -> TypeFactory:
    """
    Factory building a synthetic type with recording constructors.

    Each constructor is given as (label, parameter types) or
    (label, parameter types, True) for a variadic one. Invoking it returns
    a ``Constructed`` carrying the label and the exact argument vector.
    """

    def factory(
        name: str, *constructors: tuple[Any, ...], is_value_type: bool = False
    ) -> TypeInfo:
        type_info = TypeInfo(name, "Tests", is_value_type=is_value_type)
        for entry in constructors:
            label, parameter_types = entry[0], entry[1]
            param_array = len(entry) > 2 and bool(entry[2])
            type_info.define_constructor(
                list(parameter_types),
                recording_invoker(label),
                param_array=param_array,
            )
        return type_info

    return factory


@pytest.fixture
def provider() -> MetadataReflectionProvider:
    """Metadata provider typing Python ints as Int32."""
    return MetadataReflectionProvider()


@pytest.fixture
def resolver(provider: MetadataReflectionProvider) -> ConstructorResolver:
    return ConstructorResolver(provider)


@pytest.fixture
def metadata_activator(provider: MetadataReflectionProvider) -> Activator:
    return Activator(provider)


@pytest.fixture
def reset_logging():
    """Leave logging unconfigured before and after a test."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
