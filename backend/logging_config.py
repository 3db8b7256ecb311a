"""
Logging Configuration for the Odia IME backend
==============================================

Sets up console logging and (optionally) a rotating log file.

Usage:
    from logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)

Levels, log directory and whether to write a file come from settings
(ODIA_IME_LOG_LEVEL, ODIA_IME_LOG_DIR, ODIA_IME_LOG_TO_FILE).
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config import get_settings

# Track if logging has been set up
_logging_initialized = False


def get_log_file(log_dir: Path) -> Path:
    """Get the log file path, creating directory if needed."""
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"odia_ime_{datetime.now().strftime('%Y%m%d')}.log"


def setup_logging(
    level: Optional[int] = None,
    console_level: Optional[int] = None,
    log_to_file: Optional[bool] = None,
    force: bool = False
) -> logging.Logger:
    """
    Set up logging with console and file handlers.

    Args:
        level: Root / file handler level (default: DEBUG)
        console_level: Console handler level (default: settings.log_level)
        log_to_file: Override settings.log_to_file
        force: Force re-initialization even if already initialized

    Returns:
        The root logger

    File: rotates at 10MB, keeps 5 backups, UTF-8 (Odia text).
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return logging.getLogger()

    settings = get_settings()
    level = logging.DEBUG if level is None else level
    if console_level is None:
        console_level = getattr(logging, settings.log_level, logging.INFO)
    if log_to_file is None:
        log_to_file = settings.log_to_file

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Formatter for file (detailed)
    file_formatter = logging.Formatter(settings.log_format, datefmt=settings.log_date_format)

    # Formatter for console (concise)
    console_formatter = logging.Formatter('%(levelname)-8s | %(message)s')

    log_file = None
    if log_to_file:
        try:
            log_file = get_log_file(settings.log_dir)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(file_formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"[LOGGING] Warning: Could not create file handler: {e}", file=sys.stderr)
            log_file = None

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    for name in ['httpx', 'httpcore', 'uvicorn.access', 'asyncio']:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info("=" * 60)
    root_logger.info(f"{settings.app_name} - Logging initialized")
    if log_file:
        root_logger.info(f"Log file: {log_file}")
    root_logger.info(f"Console level: {logging.getLevelName(console_level)}")
    root_logger.info("=" * 60)

    _logging_initialized = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Usually __name__ from the calling module

    Returns:
        A configured logger
    """
    if not _logging_initialized:
        setup_logging()
    return logging.getLogger(name)


def is_initialized() -> bool:
    """Check if logging has been initialized."""
    return _logging_initialized
