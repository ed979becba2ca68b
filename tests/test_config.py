import pytest

import prettylog
from prettylog import (
    DEFAULT_CONTINUATION,
    ColorChoice,
    LoggerConfig,
    SeverityLevel,
    Timestamp,
    TimestampStyle,
    Uptime,
    get_default_config,
    set_default_config,
)

ENV_KEYS = [
    "PRETTYLOG_LEVEL",
    "PRETTYLOG_FILTER_ENV",
    "PRETTYLOG_COLOR",
    "PRETTYLOG_TARGET",
    "PRETTYLOG_LEVEL_FIELD",
    "PRETTYLOG_TIME",
    "PRETTYLOG_TIME_DIGITS",
    "PRETTYLOG_CONTINUATION",
    "LOG_FILTER",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_default_config(clean_env):
    config = LoggerConfig.from_env()
    assert config.min_level is SeverityLevel.TRACE
    assert config.filter_env_key == "LOG_FILTER"
    assert config.color is ColorChoice.AUTO
    assert config.show_target is True
    assert config.show_level is True
    assert config.time == "none"
    assert config.time_digits is None
    assert config.continuation is None


def test_config_from_env(clean_env):
    clean_env.setenv("PRETTYLOG_LEVEL", "Info")
    clean_env.setenv("PRETTYLOG_FILTER_ENV", "APP_FILTER")
    clean_env.setenv("PRETTYLOG_COLOR", "never")
    clean_env.setenv("PRETTYLOG_TARGET", "false")
    clean_env.setenv("PRETTYLOG_TIME", "UNIX")
    clean_env.setenv("PRETTYLOG_TIME_DIGITS", "3")
    clean_env.setenv("PRETTYLOG_CONTINUATION", "true")

    config = LoggerConfig.from_env()

    assert config.min_level is SeverityLevel.INFO
    assert config.filter_env_key == "APP_FILTER"
    assert config.color is ColorChoice.NEVER
    assert config.show_target is False
    assert config.time == "unix"
    assert config.time_digits == 3
    assert config.continuation == DEFAULT_CONTINUATION


def test_invalid_values_fall_back(clean_env):
    clean_env.setenv("PRETTYLOG_TIME", "sundial")
    clean_env.setenv("PRETTYLOG_TIME_DIGITS", "many")
    config = LoggerConfig.from_env()
    assert config.time == "none"
    assert config.time_digits is None


def test_custom_continuation_text(clean_env):
    clean_env.setenv("PRETTYLOG_CONTINUATION", "->")
    assert LoggerConfig.from_env().continuation == "->"


def test_build_formatter():
    formatter = LoggerConfig(
        color=ColorChoice.NEVER,
        show_level=False,
        time="unix",
        time_digits=6,
        continuation="|",
    ).build_formatter()
    config = formatter.config
    assert config.show_level is False
    assert config.show_target is True
    assert config.color_choice is ColorChoice.NEVER
    assert config.continuation == "|"
    assert isinstance(config.time, Timestamp)
    assert config.time.style == TimestampStyle.fractional(6)


def test_build_formatter_uptime():
    assert isinstance(LoggerConfig(time="uptime").build_formatter().config.time, Uptime)
    custom = LoggerConfig(time="uptime", time_digits=0).build_formatter().config.time
    assert custom.style == TimestampStyle.fractional(0)
    assert LoggerConfig().build_formatter().config.time is None


def test_build_filters(clean_env):
    clean_env.setenv("APP_FILTER", "db=info,cache=nope,broken")
    filters = LoggerConfig(filter_env_key="APP_FILTER").build_filters()
    assert dict(filters.rules()) == {"db": SeverityLevel.INFO, "cache": SeverityLevel.OFF}


def test_default_config_roundtrip():
    config = LoggerConfig(min_level=SeverityLevel.WARN)
    set_default_config(config)
    try:
        assert get_default_config() is config
    finally:
        set_default_config(None)


@pytest.mark.usefixtures("fresh_install")
def test_init_from_env(clean_env):
    clean_env.setenv("LOG_FILTER", "noisy=debug")
    set_default_config(LoggerConfig(min_level=SeverityLevel.INFO, color=ColorChoice.NEVER))
    try:
        handler = prettylog.init_from_env()
        assert handler.min_level is SeverityLevel.INFO
        assert "noisy" in handler.target_filter
        assert prettylog.try_init_from_env() is False
    finally:
        set_default_config(None)
