"""Utility modules for cmdlang.

Provides:
- logger: get_logger for logging
"""

from cmdlang.utils.logger import get_logger

__all__ = [
    "get_logger",
]
