"""
Shared utilities and global state management.

This module contains shared utilities, global settings, and logging setup
used across the telegraf migration toolkit.
"""

from .file_utils import get_output_file_path
from .globals import get_log_file_path, set_global_output_directory
from .logging import setup_logging

__all__ = [
    "get_output_file_path",
    "get_log_file_path",
    "set_global_output_directory",
    "setup_logging",
]
