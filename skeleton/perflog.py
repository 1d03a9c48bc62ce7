"""Step timing written to a logger."""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime


class PerfLogger:
    """Logs elapsed time since creation and since the previous step."""

    def __init__(self, logger: logging.Logger, name: str | None = None) -> None:
        self.logger = logger
        self.name = name or ""
        self.id = uuid.uuid4()
        self.started_at = datetime.now()
        self.start = time.perf_counter()
        self.clock = self.start
        stamp = self.started_at.strftime("%Y-%m-%d %H:%M:%S")
        if name:
            logger.info("INIT NEW PERFLOG Name=%s AT %s", self.name, stamp)
        else:
            logger.info("INIT NEW PERFLOG ID=%s AT %s", self.id, stamp)

    def log(self, msg: str) -> None:
        """Log the total and the per-step duration followed by ``msg``."""
        now = time.perf_counter()
        step = now - self.clock
        total = now - self.start
        self.logger.info("[PERFLOG %s] Clock=%fs Dur=%fs => %s", self.name, total, step, msg)
        self.clock = now

    def done(self) -> None:
        """Log the total duration."""
        total = time.perf_counter() - self.start
        self.logger.info("[PERFLOG %s DONE] Clock=%fs", self.name, total)

    def __enter__(self) -> PerfLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.done()