"""
Logging configuration for the DMP backend.

``setup_logging`` installs one console handler on the root logger, plus a
rotating file handler under ``DMP_LOG_FILE_DIR`` when ``DMP_LOG_FILE_ENABLED``
is set. Three line formats are available through ``DMP_LOG_FORMAT``:

- ``simple``: level, logger and message
- ``detailed``: adds time and source location (default)
- ``json``: one JSON object per line, including request ids and error ids
  passed via ``extra``

Noisy third-party loggers are capped in ``MODULE_LOG_LEVELS``.
"""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAME = "dmp.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

MODULE_LOG_LEVELS = {
    "dmp.server.api": "DEBUG",
    "dmp.server.services": "DEBUG",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncio": "WARNING",
    "uvicorn.access": "WARNING",
}

# Attributes passed through ``extra`` that the JSON formatter keeps
JSON_EXTRA_FIELDS = ("request_id", "error_id", "error_type", "method", "path", "status_code", "duration_ms")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.filename}:{record.lineno}",
            "message": record.getMessage(),
        }
        for field in JSON_EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for ``simple``, ``detailed`` or ``json``; unknown names fall back to detailed."""
    if log_format == "json":
        return JsonFormatter()
    if log_format == "simple":
        return logging.Formatter(SIMPLE_FORMAT)
    return logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure the root logger from ``settings``.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Overrides ``DMP_LOG_LEVEL`` for the console
        log_format: Overrides ``DMP_LOG_FORMAT``
        enable_file: Set to False to skip the file handler even when enabled in settings
    """
    from dmp.server.core.config import settings

    level = (log_level or settings.log_level).upper()
    formatter = build_formatter(log_format or settings.log_format)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    log_file: Optional[Path] = None
    if enable_file and settings.log_file_enabled:
        log_dir = Path(settings.log_file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME
        file_handler = RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root.debug(f"Logging configured: level={level}, file={log_file or 'off'}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
