"""Logging utilities for walruspy modules."""

import json
import logging
import sys
import time
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

T = TypeVar('T')

ROOT_LOGGER_NAME = 'walruspy'


class LogLevel(Enum):
    """Log levels understood by configure_logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            'timestamp': self.formatTime(record),
            'level': record.levelname.lower(),
            'logger': record.name,
            'message': record.getMessage(),
        }
        extra = getattr(record, 'meta', None)
        if extra:
            payload.update(extra)
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    The logger propagates to the root logger and only gets a default
    WARNING level when the root logger has no handlers (i.e.
    basicConfig hasn't been called yet).

    Args:
        name: Logger name (typically 'walruspy.<component>')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    console: bool = True,
    fmt: str = 'simple'
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Minimum level to emit
        console: Attach a stderr handler
        fmt: 'simple' for human-readable lines, 'json' for JSON lines

    Returns:
        The 'walruspy' logger
    """
    if fmt not in ('simple', 'json'):
        raise ValueError(f"Unknown log format: {fmt}")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.value)

    for handler in list(logger.handlers):
        if getattr(handler, '_walruspy_handler', False):
            logger.removeHandler(handler)

    if console:
        handler = logging.StreamHandler(sys.stderr)
        if fmt == 'json':
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
        handler._walruspy_handler = True
        logger.addHandler(handler)

    return logger


class Timer:
    """
    Context manager measuring and logging execution time.

    Example:
        >>> with Timer('store', logger):
        ...     do_work()
    """

    def __init__(
        self,
        label: str,
        logger: Optional[logging.Logger] = None,
        min_threshold_ms: float = 0.0,
        **meta: Any
    ):
        self.label = label
        self.logger = logger or get_logger(ROOT_LOGGER_NAME)
        self.min_threshold_ms = min_threshold_ms
        self.meta = meta
        self.duration_ms = 0.0
        self._start: Optional[float] = None

    def __enter__(self) -> 'Timer':
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.duration_ms = (time.perf_counter() - self._start) * 1000
        if exc_val is not None:
            self.meta['error'] = repr(exc_val)
        if self.duration_ms >= self.min_threshold_ms:
            self.logger.debug(
                f"Execution time for {self.label}: {self.duration_ms:.2f}ms",
                extra={'meta': {**self.meta, 'operation': self.label, 'duration': self.duration_ms}}
            )


async def time_async(
    label: str,
    fn: Callable[[], Awaitable[T]],
    logger: Optional[logging.Logger] = None,
    min_threshold_ms: float = 0.0,
    **meta: Any
) -> T:
    """Await fn() and log how long it took, also when it raises."""
    with Timer(label, logger, min_threshold_ms, **meta):
        return await fn()
