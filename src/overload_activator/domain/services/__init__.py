#!/usr/bin/env python3

"""Domain services layer."""

from . import resolution
from .reflection_provider import ReflectionProvider

__all__ = [
    "ReflectionProvider",
    "resolution",
]
