#!/usr/bin/env python3

"""Infrastructure layer for technical concerns.

Reflection providers live in ``infrastructure.reflection`` and are imported
explicitly, since they depend on the domain layer.
"""

from . import logging

__all__ = [
    "logging",
]
