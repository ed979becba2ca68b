"""
The pretty console formatter and its builder
"""

import logging
import sys
from dataclasses import dataclass, field, replace
from typing import Optional, TextIO

from .color import ColorChoice, RecordColorConfig, enable_console_colors, new_buffer
from .time_source import FormatTime, TimeLike, Timestamp, TimestampStyle, Uptime, as_time_source
from .writer import RecordWriter

DEFAULT_CONTINUATION = "⤷"


@dataclass(frozen=True)
class PrettyConfig:
    """Which fields are rendered and how they are colored"""

    show_level: bool = True
    show_target: bool = True
    time: Optional[FormatTime] = None
    continuation: Optional[str] = None
    colors: RecordColorConfig = field(default_factory=RecordColorConfig)
    color_choice: ColorChoice = ColorChoice.AUTO


class PrettyFormatter(logging.Formatter):
    """Renders records as ``LEVEL [target] time message``

    A record is rendered into its own buffer and written to the stream with
    a single call, so records logged from several threads never interleave.
    """

    def __init__(self, config: Optional[PrettyConfig] = None):
        super().__init__()
        self.config = config or PrettyConfig()

    @staticmethod
    def builder() -> "PrettyBuilder":
        return PrettyBuilder()

    def use_color(self, stream: Optional[TextIO]) -> bool:
        colored = self.config.color_choice.should_colorize(stream)
        if colored:
            enable_console_colors()
        return colored

    def render(self, record: logging.LogRecord, colored: bool = False) -> str:
        """Render ``record`` to text, ending with a newline

        Raises OSError when the time source fails; nothing is written then.
        """
        config = self.config
        writer = RecordWriter(record, config.colors)
        buffer = new_buffer(colored)

        if config.show_level:
            writer.level(buffer)
        if config.show_target:
            writer.target(buffer)
        if config.time is not None:
            writer.timestamp(buffer, config.time)
        if config.continuation is not None:
            writer.continuation(buffer, config.continuation)
        writer.message(buffer)

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            buffer.write(record.exc_text)
            buffer.write("\n")
        if record.stack_info:
            buffer.write(self.formatStack(record.stack_info))
            buffer.write("\n")

        return buffer.getvalue()

    def print(self, record: logging.LogRecord, stream: Optional[TextIO] = None) -> None:
        """Render ``record`` and write it to ``stream`` (stdout by default)"""
        stream = stream if stream is not None else sys.stdout
        text = self.render(record, self.use_color(stream))
        stream.write(text)
        stream.flush()

    def format(self, record: logging.LogRecord) -> str:
        # stock handlers add their own terminator
        return self.render(record).rstrip("\n")


class PrettyBuilder:
    """Fluent construction of a PrettyFormatter"""

    def __init__(self) -> None:
        self._config = PrettyConfig()

    def _set(self, **changes) -> "PrettyBuilder":
        self._config = replace(self._config, **changes)
        return self

    def with_custom_colors(self, colors: RecordColorConfig) -> "PrettyBuilder":
        return self._set(colors=colors)

    def with_color(self, choice: ColorChoice = ColorChoice.AUTO) -> "PrettyBuilder":
        return self._set(color_choice=choice)

    def without_color(self) -> "PrettyBuilder":
        return self._set(color_choice=ColorChoice.NEVER)

    def with_time(self, time: TimeLike) -> "PrettyBuilder":
        return self._set(time=as_time_source(time))

    def without_time(self) -> "PrettyBuilder":
        return self._set(time=None)

    def with_target(self) -> "PrettyBuilder":
        return self._set(show_target=True)

    def without_target(self) -> "PrettyBuilder":
        return self._set(show_target=False)

    def with_level(self) -> "PrettyBuilder":
        return self._set(show_level=True)

    def without_level(self) -> "PrettyBuilder":
        return self._set(show_level=False)

    def with_continuation(self, text: Optional[str] = None) -> "PrettyBuilder":
        return self._set(continuation=DEFAULT_CONTINUATION if text is None else text)

    def without_continuation(self) -> "PrettyBuilder":
        return self._set(continuation=None)

    def uptime(self) -> "PrettyBuilder":
        return self.with_time(Uptime())

    def unix_timestamp(self, style: Optional[TimestampStyle] = None) -> "PrettyBuilder":
        return self.with_time(Timestamp(style))

    def build(self) -> PrettyFormatter:
        return PrettyFormatter(self._config)
