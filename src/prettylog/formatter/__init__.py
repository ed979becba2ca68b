"""
Console formatting for prettylog
"""

from .color import (
    Color,
    ColorBuffer,
    ColorChoice,
    LevelColorConfig,
    PlainBuffer,
    RecordColorConfig,
)
from .pretty import DEFAULT_CONTINUATION, PrettyBuilder, PrettyConfig, PrettyFormatter
from .time_source import (
    FormatTime,
    FunctionTime,
    NoTime,
    Timestamp,
    TimestampStyle,
    Uptime,
)
from .writer import RecordWriter

__all__ = [
    "Color",
    "ColorBuffer",
    "ColorChoice",
    "LevelColorConfig",
    "PlainBuffer",
    "RecordColorConfig",
    "DEFAULT_CONTINUATION",
    "PrettyBuilder",
    "PrettyConfig",
    "PrettyFormatter",
    "FormatTime",
    "FunctionTime",
    "NoTime",
    "Timestamp",
    "TimestampStyle",
    "Uptime",
    "RecordWriter",
]
