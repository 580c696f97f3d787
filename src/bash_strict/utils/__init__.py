"""Utility modules for bash-strict.

Provides:
- logger: get_logger for namespaced logging
"""

from bash_strict.utils.logger import get_logger

__all__ = ["get_logger"]
