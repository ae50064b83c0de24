#!/usr/bin/env python3
"""
Tests for logging setup.
"""

import logging
import logging.handlers
from contextlib import contextmanager

from propmerge.utils.logger import _parse_size, get_logger, setup_logging


@contextmanager
def restored_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


def test_setup_logging_from_settings(tmp_path):
    log_file = tmp_path / "logs" / "propmerge.log"

    with restored_root_logger() as root:
        app_logger = setup_logging({"level": "debug", "file": str(log_file), "max_file_size": "1KB"})

        assert app_logger.name == "propmerge"
        assert root.level == logging.DEBUG
        file_handlers = [
            h for h in root.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert log_file.exists()


def test_setup_logging_console_only():
    with restored_root_logger() as root:
        setup_logging(log_level="WARNING")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1


def test_parse_size():
    assert _parse_size("10MB") == 10 * 1024 * 1024
    assert _parse_size("1.5kb") == 1536
    assert _parse_size("2GB") == 2 * 1024 ** 3
    assert _parse_size("512") == 512


def test_get_logger():
    assert get_logger("propmerge.config") is logging.getLogger("propmerge.config")
