"""A small, ordered logger that writes one formatted line per call."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import IntEnum, IntFlag
from typing import Callable, Optional, TextIO

MAX_MSG_LENGTH = 512
"""Size of the output buffer; a line keeps at most one character fewer."""

FatalHook = Callable[[], None]


class Level(IntEnum):
    """Logging levels, ordered from most to least verbose."""

    ALL = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    NONE = 6


class Style(IntFlag):
    """Bits that choose which fields appear in a log line."""

    DEFAULT = 0
    LINE_NUMBER = 1
    FILE_NAME = 2
    TIME = 4
    DATE = 8
    COLORS = 16


_PLAIN_LABELS = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO ",
    Level.WARN: "WARN ",
    Level.ERROR: "ERROR",
    Level.FATAL: "FATAL",
}

_COLORED_LABELS = {
    Level.DEBUG: "\x1b[36mDEBUG\x1b[0m",
    Level.INFO: "\x1b[32mINFO\x1b[0m ",
    Level.WARN: "\x1b[33mWARN\x1b[0m ",
    Level.ERROR: "\x1b[31mERROR\x1b[0m",
    Level.FATAL: "\x1b[35mFATAL\x1b[0m",
}


def _fit(text: str) -> str:
    return text[: MAX_MSG_LENGTH - 1]


def _caller() -> tuple[str, int]:
    """File name and line number of whoever called the function calling this."""
    frame = sys._getframe(2)
    return frame.f_code.co_filename, frame.f_lineno


class Logger:
    """A logger holding a threshold level, a style mask and a fatal hook."""

    def __init__(
        self,
        level: int = Level.INFO,
        style: int = Style.DEFAULT,
        fatal_hook: Optional[FatalHook] = None,
    ) -> None:
        self.level = Level(level)
        self.style = int(style) & 0xFF
        self.fatal_hook = fatal_hook

    def set_level(self, level: int) -> None:
        """Set the lowest level that gets written."""
        self.level = Level(level)

    def set_style(self, style: int) -> None:
        """Set the style bit mask (combine Style members with ``|``)."""
        self.style = int(style) & 0xFF

    def set_fatal_hook(self, func: Optional[FatalHook]) -> None:
        """Set the function run before a fatal message ends the program."""
        self.fatal_hook = func

    def _header(
        self, level: int, file_name: str, line_number: int, when: Optional[datetime]
    ) -> str:
        level = Level(level)
        labels = _COLORED_LABELS if self.style & Style.COLORS else _PLAIN_LABELS
        if level not in labels:
            raise ValueError(f"cannot log a message at level {level.name}")
        when = when if when is not None else datetime.now()

        parts = ["["]
        has_time = bool(self.style & Style.TIME)
        has_date = bool(self.style & Style.DATE)
        if has_time and has_date:
            parts.append(when.strftime("%H:%M:%S-%d/%m/%Y|"))
        elif has_time:
            parts.append(when.strftime("%H:%M:%S|"))
        elif has_date:
            parts.append(when.strftime("%d/%m/%Y|"))

        parts.append(labels[level])

        has_file = bool(self.style & Style.FILE_NAME)
        has_line = bool(self.style & Style.LINE_NUMBER)
        if has_file and has_line:
            parts.append(f"|{file_name}: {line_number}")
        elif has_file:
            parts.append(f"|{file_name}")
        elif has_line:
            parts.append(f"|{line_number}")

        parts.append("]: ")
        return "".join(parts)

    def format(
        self,
        level: int,
        message: str,
        file_name: str = "",
        line_number: int = 0,
        when: Optional[datetime] = None,
    ) -> str:
        """Build the line that ``jlog`` would write, without writing it."""
        return _fit(f"{self._header(level, file_name, line_number, when)}{message};\n")

    def jlog(
        self,
        level: int,
        file_name: str,
        line_number: int,
        stream: Optional[TextIO],
        message: str,
    ) -> int:
        """Write a message; return the characters written, 0 if filtered.

        A fatal message is written, the hook runs, and SystemExit(1) is raised.
        """
        if level < self.level:
            return 0
        line = self.format(level, message, file_name, line_number)
        out = stream if stream is not None else sys.stdout
        out.write(line)
        if level == Level.FATAL:
            out.flush()
            if self.fatal_hook is not None:
                self.fatal_hook()
            sys.exit(1)
        return len(line)

    def jlogf(
        self,
        level: int,
        file_name: str,
        line_number: int,
        stream: Optional[TextIO],
        fmt: str,
        *args: object,
    ) -> int:
        """Write a printf-style message; return the characters written.

        A fatal formatted message raises SystemExit(1) at once, before
        anything is written and without running the hook.
        """
        if level < self.level:
            return 0
        header = self._header(level, file_name, line_number, None)
        line = _fit(f"{header}{fmt % args}\n")
        if level == Level.FATAL:
            sys.exit(1)
        out = stream if stream is not None else sys.stdout
        out.write(line)
        return len(line)

    def log(self, level: int, message: str, stream: Optional[TextIO] = None) -> int:
        """Log a message, recording the caller's file and line."""
        file_name, line_number = _caller()
        return self.jlog(level, file_name, line_number, stream, message)

    def logf(
        self, level: int, fmt: str, *args: object, stream: Optional[TextIO] = None
    ) -> int:
        """Log a printf-style message, recording the caller's file and line."""
        file_name, line_number = _caller()
        return self.jlogf(level, file_name, line_number, stream, fmt, *args)


_DEFAULT = Logger()


def set_level(level: int) -> None:
    """Set the level of the shared logger."""
    _DEFAULT.set_level(level)


def set_style(style: int) -> None:
    """Set the style of the shared logger."""
    _DEFAULT.set_style(style)


def set_fatal_hook(func: Optional[FatalHook]) -> None:
    """Set the fatal hook of the shared logger."""
    _DEFAULT.set_fatal_hook(func)


def jlog(
    level: int,
    file_name: str,
    line_number: int,
    stream: Optional[TextIO],
    message: str,
) -> int:
    """Log through the shared logger with an explicit file and line."""
    return _DEFAULT.jlog(level, file_name, line_number, stream, message)


def jlogf(
    level: int,
    file_name: str,
    line_number: int,
    stream: Optional[TextIO],
    fmt: str,
    *args: object,
) -> int:
    """Log a formatted message through the shared logger."""
    return _DEFAULT.jlogf(level, file_name, line_number, stream, fmt, *args)


def log(level: int, message: str, stream: Optional[TextIO] = None) -> int:
    """Log through the shared logger at the caller's position."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(level, file_name, line_number, stream, message)


def logf(level: int, fmt: str, *args: object, stream: Optional[TextIO] = None) -> int:
    """Log a formatted message through the shared logger at the caller's position."""
    file_name, line_number = _caller()
    return _DEFAULT.jlogf(level, file_name, line_number, stream, fmt, *args)


def debug(message: str, stream: Optional[TextIO] = None) -> int:
    """Log a debug message through the shared logger."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(Level.DEBUG, file_name, line_number, stream, message)


def info(message: str, stream: Optional[TextIO] = None) -> int:
    """Log an info message through the shared logger."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(Level.INFO, file_name, line_number, stream, message)


def warn(message: str, stream: Optional[TextIO] = None) -> int:
    """Log a warning through the shared logger."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(Level.WARN, file_name, line_number, stream, message)


def error(message: str, stream: Optional[TextIO] = None) -> int:
    """Log an error through the shared logger."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(Level.ERROR, file_name, line_number, stream, message)


def fatal(message: str, stream: Optional[TextIO] = None) -> int:
    """Log a fatal message through the shared logger and end the program."""
    file_name, line_number = _caller()
    return _DEFAULT.jlog(Level.FATAL, file_name, line_number, stream, message)