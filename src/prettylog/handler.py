"""
Console handler combining the level gate, target rules and formatter
"""

import logging
from typing import Optional, TextIO, Union

from .filtering import LevelFilter, TargetFilter
from .formatter import PrettyFormatter
from .levels import SeverityLevel


class PrettyHandler(logging.Handler):
    """Prints accepted records through a PrettyFormatter

    Logging must never fail the caller: I/O errors while rendering or
    writing drop the record silently.
    """

    def __init__(
        self,
        formatter: Optional[PrettyFormatter] = None,
        min_level: Union[str, int, SeverityLevel] = SeverityLevel.TRACE,
        filters: Optional[TargetFilter] = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__()
        self.pretty = formatter or PrettyFormatter()
        self.setFormatter(self.pretty)
        self.level_filter = LevelFilter(min_level)
        # not ``filters``: that name is logging.Filterer's own list
        self.target_filter = filters
        self.stream = stream

    @property
    def min_level(self) -> SeverityLevel:
        return self.level_filter.min_level

    def enabled(self, level: SeverityLevel) -> bool:
        return self.level_filter.enabled(level)

    def accepts(self, record: logging.LogRecord) -> bool:
        """Apply the level gate, then the target rules"""
        if not self.level_filter.should_log(record).should_log:
            return False
        if self.target_filter is not None:
            return self.target_filter.should_log(record).should_log
        return True

    def emit(self, record: logging.LogRecord) -> None:
        if not self.accepts(record):
            return
        try:
            self.pretty.print(record, self.stream)
        except OSError:
            pass
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        pass
