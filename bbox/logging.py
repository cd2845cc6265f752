"""Console logging plus an optional JSON-lines file sink for the command line."""

from __future__ import annotations

import json
import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every record carries; anything else was passed through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_file_listener: QueueListener | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Where log records go and how verbose they are."""

    level: int = logging.INFO
    console_json: bool = False
    file_path: Path | None = None


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object; ``extra=`` values land under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extra = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root handlers with a console handler and an optional file sink."""
    shutdown_logging()
    console = logging.StreamHandler()
    console.setFormatter(JsonFormatter() if config.console_json else logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(config.level)
    root.addHandler(console)
    if config.file_path is not None:
        root.addHandler(_start_file_sink(config.file_path))


def shutdown_logging() -> None:
    """Drain and close the file sink, if one is running."""
    global _file_listener

    if _file_listener is None:
        return
    _file_listener.stop()
    for handler in _file_listener.handlers:
        handler.close()
    _file_listener = None


def _start_file_sink(path: Path) -> QueueHandler:
    global _file_listener

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    file_handler.setFormatter(JsonFormatter())
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    _file_listener = QueueListener(records, file_handler)
    _file_listener.start()
    return QueueHandler(records)
