"""Utility modules for minimark.

Provides:
- logger: get_logger and the ROOT_LOGGER_NAME namespace
"""

from minimark.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
