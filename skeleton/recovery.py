"""Turn unexpected exceptions into logged stack traces."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Iterator
from contextlib import contextmanager


def stack_trace(exc: object) -> str:
    """Return a ``panic:`` report for ``exc`` with its stack trace."""
    if isinstance(exc, BaseException):
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        stack = "".join(traceback.format_stack())
    return f"panic: {exc}\n{stack}\n"


def print_stack_trace(exc: object, logger: logging.Logger | None = None) -> None:
    """Write the stack trace of ``exc`` to ``logger`` (if given) and to stdout."""
    text = stack_trace(exc)
    if logger is not None:
        logger.info(text)
    print(text)


@contextmanager
def recover(logger: logging.Logger | None = None) -> Iterator[None]:
    """Swallow any exception raised in the block, reporting its stack trace."""
    try:
        yield
    except Exception as exc:  # noqa: BLE001 - everything is reported, nothing propagates
        print_stack_trace(exc, logger)