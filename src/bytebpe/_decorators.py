"""Reusable decorators for training utilities."""

import time
import functools
import logging
from typing import Callable

log = logging.getLogger(__name__)


def log_duration(action: str) -> Callable[[Callable], Callable]:
    """
    Log how long each call of the decorated function takes.

    :param action: Name of the step, used in the log line, e.g. ``"training"``.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            ok = False
            try:
                result = func(*args, **kwargs)
                ok = True
                return result
            # the duration is reported for failed calls too
            finally:
                elapsed = time.perf_counter() - start
                status = "completed" if ok else "failed"
                log.info("%s %s in %.2f s", action, status, elapsed)

        return wrapper

    return decorator
