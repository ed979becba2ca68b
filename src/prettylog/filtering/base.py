"""
Base classes for log filtering
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class FilterResult:
    """Result of a filtering decision"""

    should_log: bool
    reason: Optional[str] = None


class LogFilter(ABC):
    """A decision on whether a record is printed"""

    @abstractmethod
    def should_log(self, record: logging.LogRecord) -> FilterResult:
        pass
