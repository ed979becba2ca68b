"""
prettylog

Colored, target-filtered console output for the standard logging package.

    import logging
    import prettylog

    prettylog.try_init_with_filters(
        prettylog.PrettyFormatter.builder().uptime().build(),
        prettylog.SeverityLevel.DEBUG,
        prettylog.TargetFilter.from_str("urllib3=info,asyncio=warn"),
    )
    logging.getLogger("app.db").info("connected")
"""

__version__ = "0.1.0"

from .config import (
    LoggerConfig,
    get_default_config,
    init_from_env,
    set_default_config,
    try_init_from_env,
)
from .exceptions import AlreadyInitializedError, PrettyLogError, TimeSourceError
from .filtering import (
    DEFAULT_ENV_KEY,
    FilterResult,
    LevelFilter,
    LogFilter,
    TargetFilter,
)
from .formatter import (
    DEFAULT_CONTINUATION,
    Color,
    ColorChoice,
    FormatTime,
    FunctionTime,
    LevelColorConfig,
    NoTime,
    PrettyBuilder,
    PrettyConfig,
    PrettyFormatter,
    RecordColorConfig,
    RecordWriter,
    Timestamp,
    TimestampStyle,
    Uptime,
)
from .handler import PrettyHandler
from .levels import TRACE_LEVEL, SeverityLevel
from .logger import (
    get_handler,
    init,
    init_with_filters,
    is_initialized,
    try_init,
    try_init_with_filters,
)

__all__ = [
    # Installation
    "init",
    "init_with_filters",
    "try_init",
    "try_init_with_filters",
    "get_handler",
    "is_initialized",
    "init_from_env",
    "try_init_from_env",
    # Configuration
    "LoggerConfig",
    "get_default_config",
    "set_default_config",
    # Levels
    "SeverityLevel",
    "TRACE_LEVEL",
    # Filtering
    "DEFAULT_ENV_KEY",
    "FilterResult",
    "LevelFilter",
    "LogFilter",
    "TargetFilter",
    # Formatting
    "DEFAULT_CONTINUATION",
    "Color",
    "ColorChoice",
    "FormatTime",
    "FunctionTime",
    "LevelColorConfig",
    "NoTime",
    "PrettyBuilder",
    "PrettyConfig",
    "PrettyFormatter",
    "RecordColorConfig",
    "RecordWriter",
    "Timestamp",
    "TimestampStyle",
    "Uptime",
    # Handler
    "PrettyHandler",
    # Errors
    "PrettyLogError",
    "AlreadyInitializedError",
    "TimeSourceError",
]
