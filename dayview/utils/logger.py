# File: dayview/utils/logger.py
"""
Centralized logging configuration for the day view layout engine.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

from dayview.core.config_manager import Config


def _resolve_level(level: Union[int, str]) -> int:
    """Turn an int or a level name into a logging level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        # Unknown names come back as "Level X" strings
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logger(
    name: str = "dayview",
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Console logging level or level name (default: Config.LOG_LEVEL)
        log_dir: Directory for the daily log file (default: Config.LOGS_DIR)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = _resolve_level(Config.LOG_LEVEL if level is None else level)
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)

    # File handler for persistent logs
    log_dir = Path(log_dir) if log_dir else Config.LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"dayview_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
