"""Utility modules for lit2md.

Provides:
- logger: get_logger for namespaced logging
"""

from lit2md.utils.logger import get_logger

__all__ = ["get_logger"]
