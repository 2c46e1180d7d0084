"""Per-thread fields attached to records logged during a planning step."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


class LogContext:
    """Context fields for the current thread.

    Nested log_context blocks layer their fields over the outer ones; each
    block puts the outer fields back when it exits.
    """

    _local = threading.local()

    @classmethod
    def get(cls) -> dict[str, Any]:
        if not hasattr(cls._local, "context"):
            cls._local.context = {}
        ctx: dict[str, Any] = cls._local.context
        return ctx

    @classmethod
    def replace(cls, context: dict[str, Any]) -> None:
        cls._local.context = context


class ContextFilter(logging.Filter):
    """Copies LogContext onto each record; correlation_id defaults to "-"."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in LogContext.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Add fields to every record logged inside the block.

    Fields reach the records through ContextFilter, which setup_logging
    attaches to the handler.
    """
    previous = LogContext.get()
    LogContext.replace({**previous, **fields})
    try:
        yield
    finally:
        LogContext.replace(previous)


@contextmanager
def log_request_context(
    request_token: int,
    destination: str | None = None,
    correlation_id: str | None = None,
) -> Iterator[None]:
    """Tag records with the directions request they belong to."""
    fields: dict[str, Any] = {
        "request_token": request_token,
        "correlation_id": correlation_id or f"route-{request_token}",
    }
    if destination is not None:
        fields["destination"] = destination
    with log_context(**fields):
        yield
