"""Plunge logging pipeline driven by ``PlungeConfig``."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from plunge.api.logging import PlungeLoggingConfig
from plunge.runtime.config import PlungeConfig, get_plunge_config

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the ``extra=`` values attached to a record."""
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}


def configure_plunge_logging(config: PlungeLoggingConfig) -> None:
    """Install console (and optional queued file) handlers on the root logger."""
    shutdown_plunge_logging()

    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    # File writes leave the scroll thread through a queue.
    global _QUEUE_LISTENER
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_plunge_logging() -> None:
    """Stop the queued file listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_plunge_logging(config: PlungeConfig | None = None) -> bool:
    """Configure logging from plunge config unless the host already did.

    Returns whether handlers were installed.
    """
    if logging.getLogger().handlers:
        return False
    resolved = config if config is not None else get_plunge_config()
    configure_plunge_logging(resolved.logging_config())
    return True


def get_plunge_logger(name: str) -> logging.Logger:
    """Return a logger under the ``plunge`` namespace."""
    if name != "plunge" and not name.startswith("plunge."):
        name = f"plunge.{name}"
    return logging.getLogger(name)


def _build_handlers(config: PlungeLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter_for(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
