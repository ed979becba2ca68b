"""
Time sources for the timestamp field

A time source writes its text straight into the record buffer. ``NoTime``
writes nothing, ``Timestamp`` writes seconds since the UNIX epoch and
``Uptime`` writes seconds elapsed since a fixed starting point. Any callable
taking the buffer can be used through ``FunctionTime``.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Union

from ..exceptions import TimeSourceError

NANOS_PER_SECOND = 1_000_000_000
MAX_FRACTION_DIGITS = 9


@dataclass(frozen=True)
class TimestampStyle:
    """How seconds are printed: whole seconds or ``digits`` fractional digits"""

    digits: Optional[int] = None

    @classmethod
    def fractional(cls, digits: int) -> "TimestampStyle":
        if digits < 0:
            raise ValueError(f"fractional digits must be >= 0, got {digits}")
        return cls(digits)

    @property
    def is_whole(self) -> bool:
        return not self.digits

    def render(self, nanos: int) -> str:
        """Render a non-negative nanosecond count as ``secs`` or ``secs.frac``"""
        secs, subsec = divmod(nanos, NANOS_PER_SECOND)
        if self.is_whole:
            return str(secs)
        return f"{secs}.{scale(subsec, self.digits)}"


TimestampStyle.WHOLE = TimestampStyle()


def scale(nanos: int, digits: int) -> int:
    """Truncate a sub-second nanosecond count to ``digits`` leading digits"""
    if digits >= MAX_FRACTION_DIGITS:
        return nanos
    return nanos // 10 ** (MAX_FRACTION_DIGITS - digits)


class FormatTime(ABC):
    """Writes the current time into a text sink"""

    @abstractmethod
    def format_time(self, sink: TextIO) -> None:
        pass


class NoTime(FormatTime):
    def format_time(self, sink: TextIO) -> None:
        return None


class FunctionTime(FormatTime):
    """Adapts ``func(sink)`` to the time source interface"""

    def __init__(self, func: Callable[[TextIO], None]):
        self.func = func

    def format_time(self, sink: TextIO) -> None:
        self.func(sink)


class Timestamp(FormatTime):
    """Seconds since the UNIX epoch"""

    def __init__(self, style: Optional[TimestampStyle] = None):
        self.style = style or TimestampStyle.WHOLE

    def format_time(self, sink: TextIO) -> None:
        nanos = time.time_ns()
        if nanos < 0:
            raise TimeSourceError("system clock is set before the UNIX epoch")
        sink.write(self.style.render(nanos))

    def __repr__(self) -> str:
        return f"Timestamp({self.style!r})"


class Uptime(FormatTime):
    """Seconds elapsed since ``epoch``, a ``time.monotonic_ns()`` reading

    Defaults to the construction time and nine fractional digits.
    """

    def __init__(
        self, epoch: Optional[int] = None, style: Optional[TimestampStyle] = None
    ):
        self.epoch = time.monotonic_ns() if epoch is None else epoch
        self.style = style or TimestampStyle.fractional(MAX_FRACTION_DIGITS)

    @classmethod
    def now(cls, style: Optional[TimestampStyle] = None) -> "Uptime":
        return cls(style=style)

    def format_time(self, sink: TextIO) -> None:
        elapsed = time.monotonic_ns() - self.epoch
        if elapsed < 0:
            raise TimeSourceError("uptime epoch lies in the future")
        sink.write(self.style.render(elapsed))
        sink.write("s")

    def __repr__(self) -> str:
        return f"Uptime(epoch={self.epoch}, style={self.style!r})"


TimeLike = Union[FormatTime, Callable[[TextIO], None], None]


def as_time_source(value: TimeLike) -> FormatTime:
    """Coerce None or a plain callable into a FormatTime"""
    if value is None:
        return NoTime()
    if isinstance(value, FormatTime):
        return value
    if callable(value):
        return FunctionTime(value)
    raise TypeError(f"not a time source: {value!r}")
