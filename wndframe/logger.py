"""Named loggers for the framework and the application."""

from __future__ import annotations

import datetime
import enum
import logging
import sys
from typing import Any

_TRACE_LEVEL = 5
logging.addLevelName(_TRACE_LEVEL, "TRACE")


class LoggerType(enum.Enum):
    """Which logger a message goes to."""

    CORE = "CORE"
    APP = "APP"
    WITHOUT_DUPLICATES = "LOG"


class Level(enum.IntEnum):
    """Severity of a message."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    Level.TRACE: _TRACE_LEVEL,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.CRITICAL: logging.CRITICAL,
}

_LABELS = {
    _TRACE_LEVEL: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}


class _SinkFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level_label = _LABELS.get(record.levelno, record.levelname.lower())
        return super().format(record)


class DuplicateFilter(logging.Filter):
    """Drops a message equal to the last one logged within a time window.

    When a different message arrives after some were dropped, a note with the
    number of dropped messages is sent to the logger's handlers first.
    """

    def __init__(self, max_skip_duration: float | datetime.timedelta):
        super().__init__()
        if isinstance(max_skip_duration, datetime.timedelta):
            max_skip_duration = max_skip_duration.total_seconds()
        self.max_skip_duration = float(max_skip_duration)
        self._last_message: str | None = None
        self._last_time = 0.0
        self.skipped = 0

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        elapsed = record.created - self._last_time
        if message == self._last_message and elapsed <= self.max_skip_duration:
            self.skipped += 1
            return False
        if self.skipped:
            self._emit_skip_note(record)
        self._last_message = message
        self._last_time = record.created
        self.skipped = 0
        return True

    def _emit_skip_note(self, record: logging.LogRecord) -> None:
        note = logging.LogRecord(
            record.name,
            logging.INFO,
            record.pathname,
            record.lineno,
            f"Skipped {self.skipped} duplicate messages..",
            None,
            None,
        )
        note.created = record.created
        for handler in logging.getLogger(record.name).handlers:
            if note.levelno >= handler.level:
                handler.handle(note)


_loggers: dict[LoggerType, logging.Logger] = {}
_logged_once: set[tuple[str, int]] = set()


def init(log_file: str = "Framework.log") -> None:
    """Set up the loggers with a console sink and a truncated file sink."""
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        _SinkFormatter("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    file_sink = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_sink.setFormatter(
        _SinkFormatter(
            "[%(asctime)s] [%(level_label)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    for kind in LoggerType:
        logger = logging.getLogger(kind.value)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for old_filter in list(logger.filters):
            if isinstance(old_filter, DuplicateFilter):
                logger.removeFilter(old_filter)
        logger.addHandler(console)
        logger.addHandler(file_sink)
        logger.setLevel(_TRACE_LEVEL)
        logger.propagate = False
        if kind is LoggerType.WITHOUT_DUPLICATES:
            logger.addFilter(DuplicateFilter(5))
        _loggers[kind] = logger
    _logged_once.clear()


def log(kind: LoggerType, level: Level, msg: str, *args: Any) -> None:
    """Log ``msg``, formatted with ``args`` by ``str.format`` if any are given."""
    try:
        logger = _loggers[kind]
    except KeyError:
        raise RuntimeError("logging is not initialised; call init() first") from None
    if args:
        msg = msg.format(*args)
    logger.log(Level(level).logging_level, msg)


def log_once(msg: str, *args: Any) -> None:
    """Log once per call site, at trace level, without duplicates."""
    caller = sys._getframe(1)
    site = (caller.f_code.co_filename, caller.f_lineno)
    if site in _logged_once:
        return
    _logged_once.add(site)
    log(LoggerType.WITHOUT_DUPLICATES, Level.TRACE, msg, *args)


def core_trace(msg: str, *args: Any) -> None:
    log(LoggerType.CORE, Level.TRACE, msg, *args)


def core_info(msg: str, *args: Any) -> None:
    log(LoggerType.CORE, Level.INFO, msg, *args)


def core_warn(msg: str, *args: Any) -> None:
    log(LoggerType.CORE, Level.WARN, msg, *args)


def core_error(msg: str, *args: Any) -> None:
    log(LoggerType.CORE, Level.ERROR, msg, *args)


def core_critical(msg: str, *args: Any) -> None:
    log(LoggerType.CORE, Level.CRITICAL, msg, *args)


def trace(msg: str, *args: Any) -> None:
    log(LoggerType.APP, Level.TRACE, msg, *args)


def info(msg: str, *args: Any) -> None:
    log(LoggerType.APP, Level.INFO, msg, *args)


def warn(msg: str, *args: Any) -> None:
    log(LoggerType.APP, Level.WARN, msg, *args)


def error(msg: str, *args: Any) -> None:
    log(LoggerType.APP, Level.ERROR, msg, *args)


def critical(msg: str, *args: Any) -> None:
    log(LoggerType.APP, Level.CRITICAL, msg, *args)


def log_without_duplicates(msg: str, *args: Any) -> None:
    log(LoggerType.WITHOUT_DUPLICATES, Level.TRACE, msg, *args)