"""JSON and console formatters carrying the planning context fields."""

import json
import logging
from datetime import UTC, datetime

CONTEXT_FIELDS = ("request_token", "destination", "tier_id", "payment_method_id", "correlation_id")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shipping."""

    def __init__(self, environment: str = "development"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.environment,
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class DevFormatter(logging.Formatter):
    """Console lines with the context appended, e.g. ``[request_token=3 tier_id=vip]``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        pairs = [
            f"{field}={getattr(record, field)}"
            for field in CONTEXT_FIELDS
            if hasattr(record, field) and getattr(record, field) != "-"
        ]
        if not pairs:
            return line
        return f"{line} [{' '.join(pairs)}]"
