"""
Structured logging for the airdrop gateway.
Format: [TIME][LEVEL][MODULE] message
Levels: DEBUG/INFO/WARN/ERROR
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime


_ROOT = "airdrop_gateway"


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.upper()[:4]
        module = record.name.split(".")[-1] if "." in record.name else record.name
        message = record.getMessage()

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            message = f"{message}\n{exc_text}"

        return f"[{timestamp}][{level}][{module}] {message}"


def configure_logging(level: str = "INFO") -> None:
    """Attach the console handler to the gateway's root logger."""
    root = logging.getLogger(_ROOT)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(StructuredFormatter())
        root.addHandler(console_handler)


class Logger:
    """Simple structured logger for the gateway."""

    def __init__(self, module: str) -> None:
        self.module = module
        self._logger = logging.getLogger(f"{_ROOT}.{module}")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False) -> None:
        self._logger.error(message, exc_info=exc_info)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def success(self, message: str) -> None:
        self._logger.info(f"✓ {message}")

    def action(self, action: str, details: str = "") -> None:
        msg = f"ACTION: {action}"
        if details:
            msg += f" | {details}"
        self._logger.info(msg)


def get_logger(module: str) -> Logger:
    """Get a logger for a specific module."""
    return Logger(module)
