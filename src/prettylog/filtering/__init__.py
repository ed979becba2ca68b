"""
Target and level filtering for prettylog handlers
"""

from .base import FilterResult, LogFilter
from .level_filter import LevelFilter
from .target_filter import DEFAULT_ENV_KEY, TargetFilter, parse_rule

__all__ = [
    "FilterResult",
    "LogFilter",
    "LevelFilter",
    "TargetFilter",
    "DEFAULT_ENV_KEY",
    "parse_rule",
]
