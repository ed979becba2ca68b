"""
Colors and color-capable buffers

Default palette:

| Field        | Color          |
| --           | --             |
| error        | red            |
| warn         | yellow         |
| info         | green          |
| debug        | cyan           |
| trace        | blue           |
| target       | ansi256(131)   |
| timestamp    | ansi256(243)   |
| continuation | ansi256(237)   |
| message      | ansi256(231)   |
"""

import io
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

import colorama
from colorama import Fore, Style

from ..levels import SeverityLevel


@dataclass(frozen=True)
class Color:
    """A foreground color, stored as its ANSI escape sequence"""

    sequence: str

    @classmethod
    def ansi256(cls, index: int) -> "Color":
        if not 0 <= index <= 255:
            raise ValueError(f"ansi256 index out of range: {index}")
        return cls(f"\x1b[38;5;{index}m")

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls(f"\x1b[38;2;{red};{green};{blue}m")


Color.BLACK = Color(Fore.BLACK)
Color.RED = Color(Fore.RED)
Color.GREEN = Color(Fore.GREEN)
Color.YELLOW = Color(Fore.YELLOW)
Color.BLUE = Color(Fore.BLUE)
Color.MAGENTA = Color(Fore.MAGENTA)
Color.CYAN = Color(Fore.CYAN)
Color.WHITE = Color(Fore.WHITE)

RESET = Style.RESET_ALL


@dataclass(frozen=True)
class LevelColorConfig:
    """Colors of the level field, one per severity"""

    error: Color = Color.RED
    warn: Color = Color.YELLOW
    info: Color = Color.GREEN
    debug: Color = Color.CYAN
    trace: Color = Color.BLUE

    def for_level(self, level: SeverityLevel) -> Color:
        if level == SeverityLevel.ERROR:
            return self.error
        if level == SeverityLevel.WARN:
            return self.warn
        if level == SeverityLevel.INFO:
            return self.info
        if level == SeverityLevel.DEBUG:
            return self.debug
        return self.trace


@dataclass(frozen=True)
class RecordColorConfig:
    """Colors of every field of a rendered record"""

    level: LevelColorConfig = field(default_factory=LevelColorConfig)
    target: Color = Color.ansi256(131)
    timestamp: Color = Color.ansi256(243)
    continuation: Color = Color.ansi256(237)
    message: Color = Color.ansi256(231)


class PlainBuffer(io.StringIO):
    """Record buffer whose color operations do nothing"""

    def set_color(self, color: Color) -> None:
        return None

    def reset(self) -> None:
        return None


class ColorBuffer(PlainBuffer):
    """Record buffer that paints text with ANSI escape sequences"""

    def set_color(self, color: Color) -> None:
        self.write(color.sequence)

    def reset(self) -> None:
        self.write(RESET)


class ColorChoice(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: str) -> "ColorChoice":
        value = value.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return cls.ALWAYS
        if value in ("0", "false", "no", "off"):
            return cls.NEVER
        try:
            return cls(value)
        except ValueError:
            return cls.AUTO

    def should_colorize(self, stream: Optional[TextIO]) -> bool:
        """Resolve the choice against the environment and the target stream"""
        if self is ColorChoice.NEVER:
            return False
        if self is ColorChoice.ALWAYS:
            return True
        if "NO_COLOR" in os.environ or os.getenv("TERM") == "dumb":
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())


_console_fixed = False
_console_lock = threading.Lock()


def enable_console_colors() -> None:
    """Let colorama translate ANSI sequences on legacy Windows consoles, once"""
    global _console_fixed
    with _console_lock:
        if not _console_fixed:
            colorama.just_fix_windows_console()
            _console_fixed = True


def new_buffer(colored: bool) -> PlainBuffer:
    return ColorBuffer() if colored else PlainBuffer()
