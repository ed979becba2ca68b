import os
from dataclasses import dataclass
from typing import Literal, Optional

from .filtering import DEFAULT_ENV_KEY, TargetFilter
from .formatter import (
    DEFAULT_CONTINUATION,
    ColorChoice,
    PrettyBuilder,
    PrettyFormatter,
    TimestampStyle,
    Uptime,
)
from .handler import PrettyHandler
from .levels import SeverityLevel
from .logger import init_with_filters, try_init_with_filters

TimeType = Literal["none", "uptime", "unix"]


@dataclass
class LoggerConfig:
    """Configuration for the prettylog handler"""

    min_level: SeverityLevel = SeverityLevel.TRACE
    filter_env_key: str = DEFAULT_ENV_KEY
    color: ColorChoice = ColorChoice.AUTO
    show_target: bool = True
    show_level: bool = True
    time: TimeType = "none"
    time_digits: Optional[int] = None
    continuation: Optional[str] = None

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def _parse_continuation_env(cls) -> Optional[str]:
        value = os.getenv("PRETTYLOG_CONTINUATION")
        if not value or value.lower() == "false":
            return None
        if value.lower() == "true":
            return DEFAULT_CONTINUATION
        return value

    @classmethod
    def from_env(cls) -> "LoggerConfig":
        """Create configuration from environment variables"""
        time = os.getenv("PRETTYLOG_TIME", "none").lower()
        if time not in ["none", "uptime", "unix"]:
            time = "none"

        digits = os.getenv("PRETTYLOG_TIME_DIGITS")

        return cls(
            min_level=SeverityLevel.parse(os.getenv("PRETTYLOG_LEVEL", "trace")),
            filter_env_key=os.getenv("PRETTYLOG_FILTER_ENV", DEFAULT_ENV_KEY),
            color=ColorChoice.parse(os.getenv("PRETTYLOG_COLOR", "auto")),
            show_target=cls._parse_bool_env("PRETTYLOG_TARGET", "true"),
            show_level=cls._parse_bool_env("PRETTYLOG_LEVEL_FIELD", "true"),
            time=time,
            time_digits=int(digits) if digits and digits.isdigit() else None,
            continuation=cls._parse_continuation_env(),
        )

    def build_formatter(self) -> PrettyFormatter:
        builder = PrettyBuilder().with_color(self.color)
        if not self.show_target:
            builder.without_target()
        if not self.show_level:
            builder.without_level()
        if self.continuation is not None:
            builder.with_continuation(self.continuation)

        style = None
        if self.time_digits is not None:
            style = TimestampStyle.fractional(self.time_digits)
        if self.time == "unix":
            builder.unix_timestamp(style)
        elif self.time == "uptime":
            if style is None:
                builder.uptime()
            else:
                builder.with_time(Uptime(style=style))
        return builder.build()

    def build_filters(self) -> TargetFilter:
        return TargetFilter.from_env_key(self.filter_env_key)


_default_config: Optional[LoggerConfig] = None


def get_default_config() -> LoggerConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = LoggerConfig.from_env()
    return _default_config


def set_default_config(config: Optional[LoggerConfig]) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config


def init_from_env() -> PrettyHandler:
    """Install a handler configured from the environment"""
    config = get_default_config()
    return init_with_filters(config.build_formatter(), config.min_level, config.build_filters())


def try_init_from_env() -> bool:
    config = get_default_config()
    return try_init_with_filters(
        config.build_formatter(), config.min_level, config.build_filters()
    )
