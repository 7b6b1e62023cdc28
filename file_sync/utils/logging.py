"""Logging setup for File Sync.

Modules log through ``logging.getLogger(__name__)``; this module only wires
handlers for the command line front end:
- Text or JSON-lines output
- Console (stderr) and optional log file
- Extra record fields (``event``, ``path``) carried into JSON output
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union


TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord has; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                entry[key] = value
            except (TypeError, ValueError):
                entry[key] = str(value)

        return json.dumps(entry)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def _build_handlers(
    level: int,
    json_output: bool,
    log_file: Optional[Path],
    console: bool,
) -> List[logging.Handler]:
    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, DATE_FORMAT)

    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def get_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    json_output: bool = False,
    log_file: Optional[Path] = None,
    console: bool = True,
) -> logging.Logger:
    """Get a logger with its own handlers attached.

    Handlers are only added the first time a given name is requested.

    Args:
        name: Logger name (usually __name__)
        level: Logging level
        json_output: Use JSON lines instead of text
        log_file: Optional file to log to
        console: Also log to stderr

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger("file_sync.events", json_output=True)
        >>> logger.info("Created", extra={"event": "created", "path": "/b/x"})
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = _resolve_level(level)
    logger.setLevel(level)
    for handler in _build_handlers(level, json_output, log_file, console):
        logger.addHandler(handler)
    return logger


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_output: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the root logger for the whole process.

    Replaces any handlers already installed on the root logger.

    Args:
        level: Default logging level
        json_output: Use JSON lines instead of text
        log_file: Optional file to log to in addition to stderr
    """
    root_logger = logging.getLogger()
    level = _resolve_level(level)
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(level, json_output, log_file, console=True):
        root_logger.addHandler(handler)
