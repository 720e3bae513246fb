#!/usr/bin/env python3
"""
Example: process-wide logging with globalog.

Shows severity functions, lazy messages, metadata and elapsed-time logging.
Run with ``GLOBALOG_LOG_LEVEL=trace`` to see the trace entries.
"""

import time

from globalog import (
    LoggingConfig,
    Severity,
    configure_logging,
    log_elapsed_time,
    logD,
    logE,
    logI,
    logN,
    logT,
    logW,
    timed,
)


def expensive_snapshot():
    return {"workers": 4, "queue_depth": 17}


@timed("rebuild_index finished in", severity=Severity.INFO)
def rebuild_index(documents):
    time.sleep(0.05)
    return len(documents)


def main():
    configure_logging(LoggingConfig(level="trace", format="console", label="com.example.indexer"))

    logT("starting up")
    logD(lambda: f"state: {expensive_snapshot()}")
    logI("listening", {"port": 8080})
    logN("configuration reloaded", lambda: {"source": "SIGHUP"})

    rows = log_elapsed_time("loading documents took", lambda: [f"doc-{i}" for i in range(1000)])
    rebuild_index(rows)

    try:
        log_elapsed_time("this is never logged", lambda: 1 / 0, Severity.INFO)
    except ZeroDivisionError as e:
        logE("division failed", {"error": repr(e)})

    logW("shutting down")


if __name__ == "__main__":
    main()
