"""
Global settings and state management.

This module contains the process-wide settings of the telegraf migration
toolkit. They are set once from the command line or the environment before
any file is processed.
"""

import logging
import os
from pathlib import Path
from typing import Optional

# Environment variables
LOG_FILE_ENV = "TELEGRAF_MIGRATE_LOG_FILE"
OUTPUT_SUFFIX_ENV = "TELEGRAF_MIGRATE_OUTPUT_SUFFIX"

DEFAULT_OUTPUT_SUFFIX = ".migrated"

# Suffix appended to the input file name for the migrated output
OUTPUT_SUFFIX: str = os.getenv(OUTPUT_SUFFIX_ENV) or DEFAULT_OUTPUT_SUFFIX

# Directory receiving the migrated files, None writes them next to the input
GLOBAL_OUTPUT_DIR: Optional[Path] = None


def set_global_output_directory(directory: str, logger: logging.Logger) -> bool:
    """Set the global output directory.

    Args:
        directory: Directory path to set as global output directory
        logger: Logger instance

    Returns:
        True if successful, False otherwise
    """
    global GLOBAL_OUTPUT_DIR

    try:
        output_dir = Path(directory).expanduser().resolve()

        if not output_dir.exists():
            output_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created output directory: {output_dir}")

        if not output_dir.is_dir():
            logger.error(f"Path is not a directory: {output_dir}")
            return False

        GLOBAL_OUTPUT_DIR = output_dir
        logger.info(f"Global output directory set to: {output_dir}")
        return True

    except OSError as e:
        logger.error(f"Failed to set output directory {directory}: {e}")
        return False


def get_log_file_path() -> Optional[str]:
    """Return the log file path configured in the environment, if any."""
    return os.getenv(LOG_FILE_ENV) or None
