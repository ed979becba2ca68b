"""
Severity levels ordered by verbosity
"""

import logging
from enum import IntEnum
from typing import Union

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class SeverityLevel(IntEnum):
    """Severity ordered by verbosity: OFF < ERROR < WARN < INFO < DEBUG < TRACE

    A higher value is more verbose, so a threshold of TRACE lets everything
    through and OFF lets nothing through.
    """

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, value: str) -> "SeverityLevel":
        """Parse a level name case-insensitively; unknown names map to OFF"""
        return _NAMES.get(value.strip().lower(), cls.OFF)

    @classmethod
    def from_levelno(cls, levelno: int) -> "SeverityLevel":
        """Map a stdlib logging level number onto a severity"""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


_NAMES = {
    "off": SeverityLevel.OFF,
    "error": SeverityLevel.ERROR,
    "critical": SeverityLevel.ERROR,
    "warn": SeverityLevel.WARN,
    "warning": SeverityLevel.WARN,
    "info": SeverityLevel.INFO,
    "debug": SeverityLevel.DEBUG,
    "trace": SeverityLevel.TRACE,
}


def coerce_level(level: Union[str, int, "SeverityLevel"]) -> SeverityLevel:
    """Accept a SeverityLevel, a level name or a stdlib level number"""
    if isinstance(level, SeverityLevel):
        return level
    if isinstance(level, str):
        return SeverityLevel.parse(level)
    return SeverityLevel.from_levelno(level)
