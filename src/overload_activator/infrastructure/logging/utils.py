#!/usr/bin/env python3

"""Logging helpers shared across modules."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long a call took, in milliseconds.

    Exceptions are logged at DEBUG level and re-raised unchanged; reporting
    them is left to the caller.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__
        start_time = perf_counter()

        try:
            result = func(*args, **kwargs)
        except BaseException as e:
            elapsed_ms = (perf_counter() - start_time) * 1000
            logger.debug(f"{func_name} raised {type(e).__name__} after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (perf_counter() - start_time) * 1000
        logger.debug(f"{func_name} completed in {elapsed_ms:.1f}ms")
        return result

    return cast("F", wrapper)
