"""Logging for the ``frameinput`` package logger.

Only the ``frameinput`` logger is configured; the host application's root
logger and its handlers are left untouched.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from frameinput.api.logging import LoggingConfig
from frameinput.runtime.config import resolve_log_level_name

PACKAGE_LOGGER_NAME = "frameinput"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_installed: list[logging.Handler] = []
_listener: QueueListener | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_frameinput_logging(config: LoggingConfig) -> logging.Logger:
    """Install console (and optional file) handlers on the package logger.

    Records stop propagating to the root logger while these handlers are
    installed. With a file sink, both handlers run behind a queue listener so
    callers on the host event thread never block on disk writes.
    """
    global _listener

    reset_frameinput_logging()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(_level(config.level_name))

    sinks: list[logging.Handler] = [_console_handler(config.console_format)]
    if config.file_path:
        sinks.append(_file_handler(Path(config.file_path), config.file_format))

    if len(sinks) == 1:
        handler = sinks[0]
    else:
        records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        handler = QueueHandler(records)
        _listener = QueueListener(records, *sinks, respect_handler_level=True)
        _listener.start()

    package_logger.addHandler(handler)
    package_logger.propagate = False
    _installed.append(handler)
    return package_logger


def reset_frameinput_logging() -> None:
    """Remove handlers installed by ``configure_frameinput_logging``."""
    global _listener

    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    while _installed:
        handler = _installed.pop()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def setup_frameinput_logging() -> None:
    """Give the package logger a console handler unless logging is already set up."""
    if logging.getLogger(PACKAGE_LOGGER_NAME).handlers or logging.getLogger().handlers:
        return
    configure_frameinput_logging(LoggingConfig(level_name=resolve_log_level_name()))


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(kind: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(kind))
    return handler


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_formatter(kind))
    return handler


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "JsonFormatter",
    "configure_frameinput_logging",
    "reset_frameinput_logging",
    "setup_frameinput_logging",
]
