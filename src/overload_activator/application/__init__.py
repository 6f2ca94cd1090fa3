#!/usr/bin/env python3

"""Application layer exposing the construction entry points."""

from .activator import Activator, create_instance, get_default_activator

__all__ = [
    "Activator",
    "create_instance",
    "get_default_activator",
]
