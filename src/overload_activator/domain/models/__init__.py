#!/usr/bin/env python3

"""Domain models for the overload activator."""

from . import reflection

__all__ = [
    "reflection",
]
