"""
Severity levels for the global logging functions.

Severities are ordered from least to most severe and map onto standard
library logging levels, with TRACE and NOTICE registered as extra levels.
"""

import logging
from enum import IntEnum
from typing import Union


class Severity(IntEnum):
    """Ordered log severity, valued as a stdlib logging level."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @property
    def label(self) -> str:
        """Lowercase name used in config files and on the command line."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union["Severity", int, str]) -> "Severity":
        """Resolve a severity from a member, a level value or a name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown severity: {value!r}. "
            f"Must be one of: {', '.join(s.label for s in cls)}"
        )


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

logging.addLevelName(Severity.TRACE, "TRACE")
logging.addLevelName(Severity.NOTICE, "NOTICE")
