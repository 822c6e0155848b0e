"""
File utilities for output path management.

This module contains utilities for computing where migrated configuration
files are written.
"""

from pathlib import Path
from typing import Optional, Union

# Import the globals module to access the global settings dynamically
from . import globals


def get_output_file_path(input_file: Union[str, Path], output_dir: Optional[Union[str, Path]] = None) -> Path:
    """Generate the output file path for a configuration file.

    The output is named after the input file with the output suffix appended,
    e.g. ``telegraf.conf`` becomes ``telegraf.conf.migrated``.

    Args:
        input_file: Input configuration file path
        output_dir: Output directory (optional, overrides the global output directory)

    Returns:
        Path object for the output file
    """
    input_path = Path(input_file)
    filename = f"{input_path.name}{globals.OUTPUT_SUFFIX}"

    if output_dir:
        base_output_dir = Path(output_dir)
    elif globals.GLOBAL_OUTPUT_DIR:
        base_output_dir = globals.GLOBAL_OUTPUT_DIR
    else:
        return input_path.with_name(filename)

    base_output_dir.mkdir(parents=True, exist_ok=True)
    return base_output_dir / filename
