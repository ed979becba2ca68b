"""
Per-field rendering of a single record
"""

import logging

from ..levels import SeverityLevel
from .color import Color, PlainBuffer, RecordColorConfig
from .time_source import FormatTime


class RecordWriter:
    """Writes the fields of one record into a buffer

    Each colored field is wrapped in ``set_color``/``reset`` so no color
    carries over into the next field.
    """

    def __init__(self, record: logging.LogRecord, colors: RecordColorConfig):
        self.record = record
        self.colors = colors
        self.severity = SeverityLevel.from_levelno(record.levelno)

    def _painted(self, buffer: PlainBuffer, color: Color, text: str) -> None:
        buffer.set_color(color)
        buffer.write(text)
        buffer.reset()

    def level(self, buffer: PlainBuffer) -> None:
        color = self.colors.level.for_level(self.severity)
        self._painted(buffer, color, f"{self.severity.name:<5}")

    def target(self, buffer: PlainBuffer) -> None:
        buffer.write(" [")
        self._painted(buffer, self.colors.target, self.record.name)
        buffer.write("]")

    def timestamp(self, buffer: PlainBuffer, time: FormatTime) -> None:
        buffer.write(" ")
        buffer.set_color(self.colors.timestamp)
        time.format_time(buffer)
        buffer.reset()

    def continuation(self, buffer: PlainBuffer, text: str) -> None:
        """Start a new line with the continuation marker"""
        buffer.write("\n")
        self._painted(buffer, self.colors.continuation, text)

    def message(self, buffer: PlainBuffer) -> None:
        self._painted(buffer, self.colors.message, f" {self.record.getMessage()}")
        buffer.write("\n")
