"""
Command Line Interface for the telegraf migration toolkit.

This module contains CLI parsing, validation, and main execution logic.
"""

from .main import cli, main
from .validators import validate_log_level, validate_output_dir

__all__ = [
    # Validators
    "validate_log_level",
    "validate_output_dir",
    # Main execution
    "cli",
    "main",
]
