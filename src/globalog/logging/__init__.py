"""
globalog logging package

A global convenience layer over the standard library logging package:

- severity: ordered severities, including TRACE and NOTICE
- functions: logT/logD/logI/logN/logW/logE/logC bound to the global logger
- performance: elapsed-time logging for a unit of work
- loggers: the GlobalLogger handle
- manager: handler setup and the process-wide handle
- formatters: console, JSON and Rich output
- config: logging configuration model
"""

from .callsite import CallSite
from .config import LoggingConfig, create_default_config
from .formatters import ConsoleFormatter, StructuredFormatter
from .functions import log, logC, logD, logE, logI, logN, logT, logW
from .identity import application_identifier
from .loggers import GlobalLogger, LoggerBackend
from .manager import LoggingManager, configure_logging, get_global_logger, logging_manager
from .performance import log_elapsed_time, timed
from .severity import Severity

__all__ = [
    # Global logger
    "GlobalLogger",
    "LoggerBackend",
    "get_global_logger",
    "application_identifier",
    # Emission
    "Severity",
    "CallSite",
    "log",
    "logT",
    "logD",
    "logI",
    "logN",
    "logW",
    "logE",
    "logC",
    # Timing
    "log_elapsed_time",
    "timed",
    # Setup
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "create_default_config",
    "logging_manager",
    # Formatters
    "ConsoleFormatter",
    "StructuredFormatter",
]
