"""
twilio_client/core/logging.py

Purpose: Logging configuration

- Namespaced loggers under "twilio_client"
- JSON lines in production, coloured output in development
- Carries the calling service name (Twilio SMS / Twilio Verify) on failures
- Opt-in: importing the library never touches the root logger
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional

from twilio_client.core.config import settings

# Extra attributes the formatters know how to render
CONTEXT_FIELDS = ("service", "status_code")


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured JSON logging in production.
    Makes logs easily parseable by monitoring tools.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable formatter for development environment.
    """

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        message = f"{color}[{timestamp}] {record.levelname:<8}{self.RESET} {record.name}: {record.getMessage()}"

        context_parts = [
            f"{field}={getattr(record, field)}"
            for field in CONTEXT_FIELDS
            if hasattr(record, field)
        ]
        if context_parts:
            message += f" [{', '.join(context_parts)}]"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging(level: Optional[str] = None, structured: Optional[bool] = None) -> logging.Logger:
    """
    Installs a stdout handler on the "twilio_client" logger.

    Args:
        level: Logging level name, defaults to settings.LOG_LEVEL
        structured: Force JSON output on/off, defaults to on in production

    Returns:
        The package logger
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if structured is None:
        structured = settings.is_production

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if structured else DevelopmentFormatter())

    logger = logging.getLogger("twilio_client")
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    # Set transport loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.debug(f"Logging configured (level={level_name}, structured={structured})")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger under the "twilio_client" namespace
    """
    if name == "twilio_client" or name.startswith("twilio_client."):
        return logging.getLogger(name)
    return logging.getLogger(f"twilio_client.{name}")
