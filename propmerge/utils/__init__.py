"""
Utilities Module
================

Contains utility functions and helper classes.
"""

from .logger import setup_logging, get_logger

__all__ = [
    'setup_logging',
    'get_logger'
]
