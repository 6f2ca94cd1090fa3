#!/usr/bin/env python3

"""Domain layer containing resolution logic and models."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
