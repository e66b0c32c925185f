"""
Structured logging for calorie-insights

Every module logs through a child of the "calorie-insights" logger, so one
call to setup_logger configures the whole application. Logs default to
stderr because stdout carries report output.
"""
import logging
import os
import sys
import time
from datetime import datetime, timezone
from typing import TextIO

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "calorie-insights"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

JSON_FIELDS = "%(timestamp)s %(level)s %(logger)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(threadName)s] %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for application logs

    Adds a UTC timestamp, the upper-case level, the logger name, the app name
    and the thread name. Reports may be computed on a thread pool, so the
    thread name tells their log lines apart.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds")
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["app"] = DEFAULT_LOGGER_NAME
        log_record["thread"] = record.threadName


def build_formatter(format_type: str) -> logging.Formatter:
    """
    Create the formatter for a log format

    Args:
        format_type: "json" or "text"

    Raises:
        ValueError: For any other format
    """
    if format_type == "json":
        return CustomJsonFormatter(fmt=JSON_FIELDS)
    if format_type == "text":
        return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    raise ValueError(f"Unknown log format: {format_type}")


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str = "json",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Calling it again replaces the previous handler.

    Args:
        name: Logger name
        level: Log level name; falls back to LOG_LEVEL, then INFO
        format_type: "json" or "text"
        stream: Output stream (defaults to stderr)

    Returns:
        Configured logger instance
    """
    log_level = LOG_LEVELS.get((level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(build_formatter(format_type))
    logger.addHandler(handler)

    # Child loggers stop here instead of reaching the root logger
    logger.propagate = False

    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the application logger

    "calorie_insights.ingest" becomes "calorie-insights.calorie_insights.ingest".
    The application logger gets a default handler on first use.
    """
    if name != DEFAULT_LOGGER_NAME and not name.startswith(DEFAULT_LOGGER_NAME + "."):
        name = f"{DEFAULT_LOGGER_NAME}.{name}"

    get_default_logger()
    return logging.getLogger(name)


def get_default_logger() -> logging.Logger:
    """Return the application logger, configuring it if nothing has yet."""
    app_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not app_logger.handlers:
        app_logger = setup_logger(DEFAULT_LOGGER_NAME)
    return app_logger


class log_operation:
    """
    Context manager that logs how long an operation took

    Usage:
        with log_operation("Computing reports", logger=logger, records=120):
            ...

    Success is logged at INFO, failure at ERROR with the traceback. The
    exception is never suppressed.
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_default_logger()
        self.extra_fields = extra_fields
        self.started: float | None = None

    def _fields(self, **fields) -> dict:
        return {"operation": self.operation_name, **fields, **self.extra_fields}

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}", extra=self._fields())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = round((time.perf_counter() - self.started) * 1000, 3)

        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name}",
                extra=self._fields(duration_ms=duration_ms, status="success"),
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra=self._fields(
                    duration_ms=duration_ms,
                    status="error",
                    error_type=exc_type.__name__,
                    error_message=str(exc_val),
                ),
                exc_info=(exc_type, exc_val, exc_tb),
            )
        return False
