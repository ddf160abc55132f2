"""
Structured Logging Module
Provides JSON-formatted logging for feeding analysis sessions into log aggregation tools
"""

import json
import logging
from typing import Any


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON.

    SECURITY STORY: Analysts often ship tool logs to a shared SIEM. The
    samples being analysed can carry a victim's personal data, so extra
    fields that hold message content (raw text, body) are never written in
    full; the log still records that the field was present.
    """

    # Fields that may carry message content - never log their values
    SENSITIVE_FIELDS = {
        'body', 'raw', 'payload', 'content', 'password', 'token', 'secret'
    }

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Python logging.LogRecord to format

        Returns:
            JSON string with structured log data
        """
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra context, e.g. logger.info("msg", extra={"extra_fields": {"filename": name}})
        if hasattr(record, "extra_fields"):
            log_data.update({
                k: self._sanitize_value(k, v)
                for k, v in record.extra_fields.items()
            })

        return json.dumps(log_data, default=str)

    def _sanitize_value(self, key: str, value: Any) -> Any:
        """Return "[REDACTED]" for sensitive fields, the value otherwise."""
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in self.SENSITIVE_FIELDS):
            return "[REDACTED]"
        return value
