"""
Logging Utilities
=================

Centralized logging configuration for applications using propmerge.
"""

import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, Optional


def setup_logging(
    config: Optional[Dict[str, Any]] = None,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up centralized logging configuration.

    Args:
        config: ``logging`` section of the merger settings
        log_level: Logging level
        log_file: Log file path
        max_file_size: Maximum log file size
        backup_count: Number of backup files to keep

    Returns:
        Configured package logger
    """
    if config:
        log_level = config.get('level', log_level)
        log_file = config.get('file', log_file)
        max_file_size = config.get('max_file_size', max_file_size)
        backup_count = config.get('backup_count', backup_count)

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_file_size),
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger('propmerge')
    app_logger.info(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return app_logger


def _parse_size(size_str: str) -> int:
    """
    Parse size string to bytes.

    Args:
        size_str: Size string (e.g., '10MB', '1GB')

    Returns:
        Size in bytes
    """
    size_str = str(size_str).upper().strip()

    if size_str.endswith('KB'):
        return int(float(size_str[:-2]) * 1024)
    elif size_str.endswith('MB'):
        return int(float(size_str[:-2]) * 1024 * 1024)
    elif size_str.endswith('GB'):
        return int(float(size_str[:-2]) * 1024 * 1024 * 1024)
    else:
        # Assume bytes
        return int(size_str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
