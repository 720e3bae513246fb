"""
Severity-tagged logging functions bound to the global logger.

Messages and metadata may be passed as zero-argument callables; they are only
evaluated when the global logger accepts the entry's severity. The caller's
file, function and line are captured automatically and can be overridden
with the ``file``, ``function`` and ``line`` keyword arguments.

Any callable passed as a message or metadata is treated as a producer and
called, so to log a callable object itself wrap it: ``logI(lambda: repr(job))``.
"""

from typing import Any, Callable, Mapping, Optional, Union

from .callsite import CallSite
from .manager import get_global_logger
from .severity import Severity

Message = Union[Any, Callable[[], Any]]
Metadata = Union[
    Optional[Mapping[str, Any]], Callable[[], Optional[Mapping[str, Any]]]
]


def _evaluate(value):
    return value() if callable(value) else value


def _emit(
    severity: Severity,
    message: Message,
    metadata: Metadata,
    file: Optional[str],
    function: Optional[str],
    line: Optional[int],
    depth: int,
) -> None:
    handle = get_global_logger()
    if not handle.is_enabled(severity):
        return
    site = CallSite.capture(depth).override(file, function, line)
    handle.log(
        severity,
        _evaluate(message),
        _evaluate(metadata),
        file=site.file,
        function=site.function,
        line=site.line,
    )


def log(
    message: Message,
    severity: Union[Severity, int, str],
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Log ``message`` at ``severity`` through the global logger.

    ``message`` and ``metadata`` may be values or zero-argument callables;
    every callable is invoked to produce the value, including classes and
    objects defining ``__call__``.
    """
    _emit(Severity.parse(severity), message, metadata, file, function, line, 2)


def logT(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for messages that contain information normally of use only
    when tracing the execution of a program."""
    _emit(Severity.TRACE, message, metadata, file, function, line, 2)


def logD(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for messages that contain information normally of use only
    when debugging a program."""
    _emit(Severity.DEBUG, message, metadata, file, function, line, 2)


def logI(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for informational messages."""
    _emit(Severity.INFO, message, metadata, file, function, line, 2)


def logN(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for conditions that are not error conditions, but that may
    require special handling."""
    _emit(Severity.NOTICE, message, metadata, file, function, line, 2)


def logW(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for messages that are not error conditions, but more severe
    than notice."""
    _emit(Severity.WARNING, message, metadata, file, function, line, 2)


def logE(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for error conditions."""
    _emit(Severity.ERROR, message, metadata, file, function, line, 2)


def logC(
    message: Message,
    metadata: Metadata = None,
    *,
    file: Optional[str] = None,
    function: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Appropriate for critical error conditions that usually require
    immediate attention."""
    _emit(Severity.CRITICAL, message, metadata, file, function, line, 2)


SEVERITY_FUNCTIONS = {
    Severity.TRACE: logT,
    Severity.DEBUG: logD,
    Severity.INFO: logI,
    Severity.NOTICE: logN,
    Severity.WARNING: logW,
    Severity.ERROR: logE,
    Severity.CRITICAL: logC,
}
