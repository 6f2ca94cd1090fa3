"""Overload Activator - runtime constructor overload resolution and invocation."""

from .application import Activator, create_instance
from .config import Config
from .domain.errors import (
    ActivatorError,
    AmbiguousMatchError,
    InvalidArgumentError,
    NoMatchingConstructorError,
)
from .infrastructure.reflection import (
    MetadataReflectionProvider,
    PythonReflectionProvider,
    constructor,
)
from .main import main

__all__ = [
    "Activator",
    "ActivatorError",
    "AmbiguousMatchError",
    "Config",
    "InvalidArgumentError",
    "MetadataReflectionProvider",
    "NoMatchingConstructorError",
    "PythonReflectionProvider",
    "constructor",
    "create_instance",
    "main",
]
