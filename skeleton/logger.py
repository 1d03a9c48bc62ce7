"""JSON logging set up from configuration."""

from __future__ import annotations

import glob
import gzip
import json
import logging
import os
import shutil
import sys
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from skeleton.config import Config

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_MAP: dict[str, int] = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

FALLBACK_LEVEL = "info"

_LEVEL_NAMES = {
    logging.CRITICAL: "fatal",
    logging.ERROR: "error",
    logging.WARNING: "warning",
    logging.INFO: "info",
    logging.DEBUG: "debug",
    TRACE: "trace",
}

_MAX_BACKUPS = 8
_MAX_AGE_DAYS = 60
_DEFAULT_MAX_SIZE_MB = 100


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line, including the caller."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "file": f"{record.pathname}:{record.lineno}",
            "func": record.funcName,
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname.lower()),
            "msg": record.getMessage(),
            "time": datetime.fromtimestamp(record.created, timezone.utc).astimezone().isoformat(),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=str)


class _CompressingRotatingFileHandler(RotatingFileHandler):
    """Size-rotated file handler that gzips backups and drops old ones."""

    def __init__(self, filename: str, max_bytes: int, backup_count: int, max_age_days: int) -> None:
        super().__init__(
            filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8", delay=True
        )
        self._max_age = max_age_days * 86400

    def rotation_filename(self, default_name: str) -> str:
        return default_name + ".gz"

    def rotate(self, source: str, dest: str) -> None:
        if os.path.exists(source):
            with open(source, "rb") as src, gzip.open(dest, "wb") as dst:
                shutil.copyfileobj(src, dst)
            os.remove(source)
        self._prune()

    def _prune(self) -> None:
        cutoff = time.time() - self._max_age
        for path in glob.glob(glob.escape(self.baseFilename) + ".*.gz"):
            try:
                if os.path.getmtime(path) < cutoff:
                    os.remove(path)
            except OSError:
                pass


def new_logger(config: Config) -> logging.Logger:
    """Create a JSON logger writing to stdout and, if LOG_PATH is set, a rotating file."""
    logger = logging.Logger(config.get_string("APP_NAME") or "skeleton")

    level = config.get_string("LOG_LEVEL")
    if level not in LEVEL_MAP:
        level = FALLBACK_LEVEL
    logger.setLevel(LEVEL_MAP[level])

    formatter = JsonFormatter()
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    filename = config.get_string("LOG_PATH")
    if filename.strip(" \t\\/"):
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        size_mb = config.get_int("LOG_MAX_SIZE")
        if size_mb <= 0:
            size_mb = _DEFAULT_MAX_SIZE_MB
        file_handler = _CompressingRotatingFileHandler(
            filename, size_mb * 1024 * 1024, _MAX_BACKUPS, _MAX_AGE_DAYS
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger