"""
Shared logging utilities.

This module contains the logging setup used by the command line interface.
"""

import getpass
import logging
import os
import platform
import socket
import stat
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .globals import get_log_file_path

LEVEL_MAP = {
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


class CustomFormatter(logging.Formatter):
    """Custom formatter that includes username and hostname in log messages."""

    def __init__(self):
        super().__init__(
            '%(asctime)s - %(levelname)s - [%(username)s@%(hostname)s] - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.username = getpass.getuser()
        self.hostname = socket.gethostname()

    def format(self, record):
        record.username = self.username
        record.hostname = self.hostname
        return super().format(record)


class ReadOnlyRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that sets rotated files to read-only."""

    def doRollover(self):
        super().doRollover()
        if self.backupCount > 0:
            rotated_file = f"{self.baseFilename}.1"
            if os.path.exists(rotated_file):
                try:
                    if os.name == 'nt' or platform.system().lower().startswith('win'):
                        os.chmod(rotated_file, stat.S_IREAD)
                    else:
                        os.chmod(rotated_file, 0o444)
                except OSError as e:
                    logging.getLogger(__name__).warning(f"Could not set rotated log file to read-only: {e}")


def setup_logging(verbose: bool = False, log_level: str = "INFO", log_file_path: Optional[str] = None) -> logging.Logger:
    """Setup logging configuration.

    Log records go to stderr so that they never mix with migrated output. A
    rotating log file is added when a path is given or configured in the
    environment.

    Args:
        verbose (bool): Enable verbose logging (overrides log_level)
        log_level (str): Logging level (ERROR, WARNING, INFO, DEBUG)
        log_file_path (str): Log file path (optional, overrides environment variable)

    Returns:
        logging.Logger: Configured logger instance
    """
    if verbose:
        # Verbose overrides log_level
        actual_level = logging.DEBUG
    else:
        actual_level = LEVEL_MAP.get(log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    handlers = [console_handler]

    log_file = log_file_path or get_log_file_path()
    if log_file:
        log_path = Path(log_file)
        if log_path.parent != Path('.'):
            log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = ReadOnlyRotatingFileHandler(
            log_file, maxBytes=1_048_576, backupCount=5, encoding='utf-8', mode='a'
        )
        file_handler.setFormatter(CustomFormatter())
        handlers.append(file_handler)

    logging.basicConfig(
        level=actual_level,
        handlers=handlers,
        force=True
    )

    logger = logging.getLogger(__name__)
    if log_file:
        logger.debug(f"Logging initialized. Log file: {log_file}")
    logger.debug(f"Log level set to: {logging.getLevelName(actual_level)}")
    return logger
