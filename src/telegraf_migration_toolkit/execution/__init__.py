"""
Execution functions for the telegraf migration toolkit.

This module contains the operations invoked by the command line interface.
"""

from .migrate_operations import execute_migrate_files
from .utils import create_progress_bar

__all__ = [
    "create_progress_bar",
    "execute_migrate_files",
]
