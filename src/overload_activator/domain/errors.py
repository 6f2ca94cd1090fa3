#!/usr/bin/env python3

"""Errors raised while resolving a constructor.

Anything raised by the constructor body itself is not wrapped: it reaches
the caller unchanged.
"""


class ActivatorError(Exception):
    """Base class for constructor resolution failures."""


class InvalidArgumentError(ActivatorError, ValueError):
    """The target type was not supplied."""


class AmbiguousMatchError(ActivatorError, TypeError):
    """More than one constructor accepts the given arguments."""


class NoMatchingConstructorError(ActivatorError, TypeError):
    """No constructor accepts the given arguments."""
