"""
Logger utility for staticmcp.

Console output goes to stderr, warnings and errors only. When
STATICMCP_LOG_DIR is set, rotating file logs are written there as well:
- staticmcp.log: Main log with 5MB rotation, keeps 3 backups
- staticmcp.errors.log: Errors only, 2MB rotation, keeps 2 backups
- staticmcp.json: Structured JSON, 5MB rotation, keeps 2 backups
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_DIR_ENV = "STATICMCP_LOG_DIR"
DEBUG_ENV = "STATICMCP_DEBUG"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def is_debug_enabled() -> bool:
    """Debug mode from environment."""
    return os.getenv(DEBUG_ENV, "false").lower() == "true"


def _get_log_dir() -> Optional[Path]:
    log_dir = os.getenv(LOG_DIR_ENV)
    if not log_dir:
        return None
    path = Path(log_dir).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get or create a logger with console and optional rotating file handlers.

    Args:
        name: Logger name
        level: Optional logging level (defaults to DEBUG when
            STATICMCP_DEBUG=true, INFO otherwise)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        text_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if is_debug_enabled() else logging.WARNING)
        console_handler.setFormatter(text_formatter)
        logger.addHandler(console_handler)

        try:
            log_dir = _get_log_dir()
        except OSError as e:
            logger.warning(f"File logging unavailable: {e}")
            log_dir = None

        if log_dir is not None:
            main_handler = RotatingFileHandler(
                log_dir / "staticmcp.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            main_handler.setLevel(logging.DEBUG)
            main_handler.setFormatter(text_formatter)
            logger.addHandler(main_handler)

            error_handler = RotatingFileHandler(
                log_dir / "staticmcp.errors.log", maxBytes=2 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(text_formatter)
            logger.addHandler(error_handler)

            json_handler = RotatingFileHandler(
                log_dir / "staticmcp.json", maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
            json_handler.setLevel(logging.INFO)
            json_handler.setFormatter(JsonFormatter())
            logger.addHandler(json_handler)

    if level is not None:
        logger.setLevel(level)
    elif not logger.level:
        logger.setLevel(logging.DEBUG if is_debug_enabled() else logging.INFO)

    return logger
