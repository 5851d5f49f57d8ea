"""Timing helper for the resize stages."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator logging the wall time of a call at DEBUG level.

    The timing is logged whether the call returns or raises.

    Usage:
        @timed
        def resize_image(...):
            ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
