"""
Elapsed-time logging.

Provides a helper that times a unit of work and logs the duration through the
global logger, and a decorator built on it.
"""

import time
from functools import wraps
from typing import Callable, Optional, TypeVar, Union

from .functions import Message, Metadata, _emit
from .severity import Severity

T = TypeVar("T")


def log_elapsed_time(
    message: Message,
    work: Callable[[], T],
    severity: Union[Severity, int, str] = Severity.TRACE,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> T:
    """Run ``work``, log how long it took and return its result.

    The entry reads ``"<message> <seconds>"`` where seconds is measured with
    ``time.perf_counter``. Exceptions raised by ``work`` propagate unchanged
    and nothing is logged for a failed run.

    Args:
        message: Message text, or a callable producing it
        work: Zero-argument callable to run
        severity: Severity of the timing entry
        metadata: Metadata mapping, or a callable producing it
        file: Overrides the captured call-site file
        function: Overrides the captured call-site function
        line: Overrides the captured call-site line

    Returns:
        Whatever ``work`` returned
    """
    severity = Severity.parse(severity)

    start = time.perf_counter()
    result = work()
    end = time.perf_counter()
    elapsed = end - start

    _emit(
        severity,
        lambda: f"{message() if callable(message) else message} {elapsed}",
        metadata,
        file,
        function,
        line,
        2,
    )
    return result


def timed(message: Optional[str] = None, severity: Union[Severity, int, str] = Severity.TRACE):
    """Decorator to log the execution time of a function.

    The entry is attributed to the decorated function's definition.
    """
    def decorator(func):
        code = func.__code__
        text = message or f"{func.__qualname__} completed in"

        @wraps(func)
        def wrapper(*args, **kwargs):
            return log_elapsed_time(
                text,
                lambda: func(*args, **kwargs),
                severity,
                file=code.co_filename,
                function=func.__name__,
                line=code.co_firstlineno,
            )
        return wrapper
    return decorator
