"""Logging for the planning core: context fields, PII masking, formatters."""

from .context import ContextFilter, LogContext, log_context, log_request_context
from .filters import PIIFilter
from .formatters import CONTEXT_FIELDS, DevFormatter, JSONFormatter
from .setup import setup_logging, setup_logging_from_settings

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "log_context",
    "log_request_context",
    "CONTEXT_FIELDS",
    "JSONFormatter",
    "DevFormatter",
    "PIIFilter",
    "LogContext",
    "ContextFilter",
]
