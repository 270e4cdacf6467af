"""Structured logging with optional rotating file handler"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog
from structlog.stdlib import add_log_level, filter_by_level

from skin_profit.core.config import settings
from skin_profit.core.constants import LOG_BACKUP_COUNT, LOG_EVENT_PAD, LOG_MAX_BYTES


def add_timestamp(logger: Any, method_name: str, event_dict: Dict) -> Dict:
    """Add compact timestamp to log entries"""
    event_dict["timestamp"] = datetime.now().strftime("%H:%M:%S")
    return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> None:
    """Configure structlog on top of stdlib logging

    Console output goes to stderr so command output on stdout stays clean.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format type ('json' or 'text')
        log_dir: Directory for rotating log files (console only when None)
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep
    """
    level = getattr(logging, log_level or settings.log_level)
    format_type = log_format or settings.log_format
    log_directory = log_dir or settings.log_dir

    formatter = logging.Formatter("%(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_directory:
        log_path = Path(log_directory)
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        file_handler = RotatingFileHandler(
            log_path / f"calculator_{timestamp}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if format_type == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        # No ANSI colors when the same line also lands in a file
        use_colors = not log_directory and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=use_colors, pad_event_to=LOG_EVENT_PAD)

    structlog.configure(
        processors=[
            filter_by_level,
            add_log_level,
            add_timestamp,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("profit_calculated", currency="UAH", profit_usd="1.18")
    """
    return structlog.get_logger(name)
