"""
Minimum-severity gate
"""

import logging
from typing import Union

from ..levels import SeverityLevel, coerce_level
from .base import FilterResult, LogFilter


class LevelFilter(LogFilter):
    """Let through records at or below a maximum verbosity"""

    def __init__(self, min_level: Union[str, int, SeverityLevel] = SeverityLevel.TRACE):
        self.min_level = coerce_level(min_level)

    def enabled(self, level: SeverityLevel) -> bool:
        return level != SeverityLevel.OFF and level <= self.min_level

    def should_log(self, record: logging.LogRecord) -> FilterResult:
        level = SeverityLevel.from_levelno(record.levelno)
        should_log = self.enabled(level)
        return FilterResult(
            should_log=should_log,
            reason=f"level_filter: {level.name} {'<=' if should_log else '>'} {self.min_level.name}",
        )
