"""
CLI argument validators.

This module contains Click callbacks for validating command line options.
"""

from pathlib import Path

import click

VALID_LOG_LEVELS = ["ERROR", "WARNING", "INFO", "DEBUG"]


def validate_output_dir(ctx, param, value):
    """Click validator for the output directory."""
    if value is None:
        return value

    if not value.strip():
        raise click.BadParameter(f"{param.name} cannot be empty")

    output_path = Path(value)
    if output_path.exists() and not output_path.is_dir():
        raise click.BadParameter(f"Output path is not a directory: {value}")

    return value


def validate_log_level(ctx, param, value):
    """Click validator for log level."""
    if value is None:
        return value

    if value.upper() not in VALID_LOG_LEVELS:
        raise click.BadParameter(f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}")

    return value.upper()
