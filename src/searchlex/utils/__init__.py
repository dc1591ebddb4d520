"""Utility modules for searchlex.

Provides:
- logger: get_logger for logging
"""

from searchlex.utils.logger import get_logger

__all__ = ["get_logger"]
