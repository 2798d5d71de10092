"""Coloured console logging with a hook for other log consumers."""

from __future__ import annotations

import enum
import sys
from typing import Any, ClassVar, TextIO

from . import timing
from .eventing import Event

RESET = "\033[0m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
RED = "\033[31m"


class LogLevel(enum.Enum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_PREFIXES = {
    LogLevel.DEBUG: "",
    LogLevel.INFO: CYAN + "[Info] ",
    LogLevel.WARNING: YELLOW + "[Warning] ",
    LogLevel.ERROR: RED + "[Error] ",
}


class Logger:
    """Writes printf-style messages to the console and announces them."""

    message_received: ClassVar[Event] = Event()
    stream: ClassVar[TextIO | None] = None

    def __init__(self) -> None:
        raise TypeError("Logger is not meant to be instantiated")

    @classmethod
    def debug(cls, fmt: str, *args: Any) -> None:
        cls._log(LogLevel.DEBUG, fmt, args)

    @classmethod
    def info(cls, fmt: str, *args: Any) -> None:
        cls._log(LogLevel.INFO, fmt, args)

    @classmethod
    def warning(cls, fmt: str, *args: Any) -> None:
        cls._log(LogLevel.WARNING, fmt, args)

    @classmethod
    def error(cls, fmt: str, *args: Any) -> None:
        cls._log(LogLevel.ERROR, fmt, args)

    @classmethod
    def _log(cls, level: LogLevel, fmt: str, args: tuple[Any, ...]) -> None:
        message = fmt % args if args else fmt
        stream = cls.stream if cls.stream is not None else sys.stdout
        stream.write(
            f"{_PREFIXES.get(level, '[Unknown] ')}"
            f"[{timing.get_date_and_time()}] {message}{RESET}\n"
        )
        stream.flush()
        cls.message_received.invoke(level, message)