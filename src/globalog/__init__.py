"""
globalog: process-wide logging helpers

A thin global layer over the standard library logging package:

- A lazily created, process-wide logger labelled with the application identity
- logT/logD/logI/logN/logW/logE/logC for trace through critical severities
- log_elapsed_time to time a unit of work and log how long it took

Messages and metadata can be passed as zero-argument callables so they are
only built when the entry will actually be emitted:

    from globalog import logD, log_elapsed_time

    logD(lambda: f"cache state: {cache.dump()}", {"entries": len(cache)})
    rows = log_elapsed_time("query took", lambda: db.fetch_all(sql))
"""

__version__ = "0.1.0"

from .logging import (
    CallSite,
    GlobalLogger,
    LoggingConfig,
    Severity,
    configure_logging,
    get_global_logger,
    log,
    log_elapsed_time,
    logC,
    logD,
    logE,
    logI,
    logN,
    logT,
    logW,
    timed,
)

__all__ = [
    "__version__",
    "CallSite",
    "GlobalLogger",
    "LoggingConfig",
    "Severity",
    "configure_logging",
    "get_global_logger",
    "log",
    "logT",
    "logD",
    "logI",
    "logN",
    "logW",
    "logE",
    "logC",
    "log_elapsed_time",
    "timed",
]
