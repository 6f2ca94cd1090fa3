#!/usr/bin/env python3

"""Reflection providers backing the constructor resolver."""

from .metadata_provider import MetadataReflectionProvider
from .python_provider import PythonReflectionProvider, constructor, is_constructor

__all__ = [
    "MetadataReflectionProvider",
    "PythonReflectionProvider",
    "constructor",
    "is_constructor",
]
