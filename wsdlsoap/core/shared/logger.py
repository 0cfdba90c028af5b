"""
Shared Logger

Logging for SOAP calls. The client logs through a CallLogger, which
attaches the service namespace and, once a call starts, the method and
endpoint to every record as ``soap_context``. Both formatters know how to
render that context.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

CLIENT_LOGGER = "wsdlsoap.client"

# Promoted to top-level keys by JSONFormatter, in this order.
CALL_FIELDS = ("service", "method", "endpoint", "status_code", "fault_code")

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _soap_context(record: logging.LogRecord) -> dict[str, Any]:
    return dict(getattr(record, "soap_context", None) or {})


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Call fields (service, method, endpoint, status_code, fault_code) become
    top-level keys so log pipelines can filter on them; anything else the
    caller attached (sizes, descriptions) goes under ``context``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context = _soap_context(record)
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CALL_FIELDS:
            if key in context:
                entry[key] = context.pop(key)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Pipe-separated text line with the call context as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _soap_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} | {pairs}"


class CallLogger:
    """Logger bound to one SOAP service and optionally one call."""

    def __init__(self, service: str, call: dict[str, Any] | None = None, name: str = CLIENT_LOGGER):
        self._logger = logging.getLogger(name)
        self.service = service
        self.call = dict(call or {})

    @property
    def context(self) -> dict[str, Any]:
        return {"service": self.service, **self.call}

    def for_call(self, method: str, endpoint: str) -> "CallLogger":
        """Return a logger that tags records with method and endpoint."""
        return CallLogger(self.service, {"method": method, "endpoint": endpoint}, self._logger.name)

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra={"soap_context": {**self.context, **fields}})


def configure_logging(
    level: str = "INFO",
    format_type: str = "plain",
    log_file: str | None = None,
    logger_name: str = "wsdlsoap",
) -> logging.Logger:
    """
    Configure logging for the SOAP client package.

    Only the package logger is touched so host applications keep
    control of the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'json' or 'plain'
        log_file: Optional file receiving JSON records
        logger_name: Logger to configure

    Returns:
        The configured logger
    """
    numeric_level = getattr(logging, level.upper())
    package_logger = logging.getLogger(logger_name)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(JSONFormatter() if format_type == "json" else TextFormatter())
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    return package_logger


def get_client_logger(service_namespace: str) -> CallLogger:
    """Get logger for a SOAP client bound to a service namespace."""
    return CallLogger(service_namespace)
