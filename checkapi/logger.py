"""
Structured logging configuration for the check API.
Outputs JSON-formatted logs with contextual information.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs logs as JSON.
    Includes contextual fields like trid, flow and zone when available.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: LogRecord instance

        Returns:
            JSON string with log data
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        contextual_fields = [
            "trid",
            "flow",
            "zone",
            "client_id",
            "runner",
            "action",
            "failure_kind",
            "available",
            "duration_ms",
            "error_type",
        ]

        for field in contextual_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logger(
    name: str = "checkapi",
    level: str = "INFO",
    enable_json: bool = True
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: If True, use JSON formatter; if False, use standard formatter

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if enable_json:
        formatter = JSONFormatter()
    else:
        # Standard formatter for local development
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.propagate = False

    return logger


# Level and format are applied by configure_logger_from_config()
logger = logging.getLogger("checkapi")


def configure_logger_from_config():
    """
    Configure logger using settings from config module.
    Call this after config is loaded.
    """
    from .config import LOG_LEVEL, LOG_JSON

    global logger
    logger = setup_logger(level=LOG_LEVEL.upper(), enable_json=LOG_JSON)


def log_with_context(
    level: str,
    message: str,
    trid: Optional[str] = None,
    flow: Optional[str] = None,
    zone: Optional[str] = None,
    action: Optional[str] = None,
    **kwargs
):
    """
    Log a message with contextual fields.

    Args:
        level: Log level (info, warning, error, debug)
        message: Log message
        trid: Client transaction id of the flow call
        flow: Flow kind being executed
        zone: Managed zone of the checked name
        action: Action taken
        **kwargs: Additional contextual fields
    """
    extra = {}

    if trid is not None:
        extra["trid"] = trid
    if flow is not None:
        extra["flow"] = flow
    if zone is not None:
        extra["zone"] = zone
    if action is not None:
        extra["action"] = action

    extra.update(kwargs)

    log_func = getattr(logger, level.lower())
    log_func(message, extra=extra)


def log_info(message: str, **kwargs):
    """Log info message with context"""
    log_with_context("info", message, **kwargs)


def log_warning(message: str, **kwargs):
    """Log warning message with context"""
    log_with_context("warning", message, **kwargs)


def log_error(message: str, exc_info=False, **kwargs):
    """
    Log error message with context.

    exc_info may be True (inside an except block) or an exception instance
    captured earlier, in which case its traceback is logged.
    """
    if exc_info:
        logger.error(message, exc_info=exc_info, extra=kwargs)
    else:
        log_with_context("error", message, **kwargs)


def log_debug(message: str, **kwargs):
    """Log debug message with context"""
    log_with_context("debug", message, **kwargs)
