"""
Migrate operations for configuration files.

This module contains the driver that migrates a list of configuration files
one after the other.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import click

from ..core.errors import MigrationToolkitError, OutputCollisionError
from ..core.registry import MigrationRegistry
from ..core.transformer import ConfigMigrator
from ..shared.file_utils import get_output_file_path
from .utils import create_progress_bar


def execute_migrate_files(
    files: List[Union[str, Path]],
    registry: MigrationRegistry,
    output_dir: Optional[Union[str, Path]] = None,
    debug: bool = False,
    quiet: bool = False,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Migrate configuration files in the order given.

    A failing file is reported and skipped, the remaining files are still
    processed. An input whose output file was already written in this run
    fails instead of overwriting it.

    Args:
        files: Configuration files to migrate
        registry: Frozen migration registry
        output_dir: Directory for the migrated files (optional)
        debug: Dump migrated sections
        quiet: Suppress progress bar and summary
        logger: Logger instance (optional)

    Returns:
        int: Number of files that failed
    """
    logger = logger or logging.getLogger(__name__)
    migrator = ConfigMigrator(registry, logger=logger, debug=debug)
    failed = 0
    written: Dict[Path, Union[str, Path]] = {}

    progress_bar = create_progress_bar(
        total=len(files),
        desc="Migrating",
        unit="files",
        disable=quiet or debug or len(files) < 2,
    )

    with progress_bar:
        for filename in files:
            try:
                output_file = get_output_file_path(filename, output_dir)
                key = output_file.resolve()
                if key in written:
                    raise OutputCollisionError(output_file, written[key])
                migrator.migrate_file(filename, output_file)
                written[key] = filename
            except (OSError, MigrationToolkitError) as e:
                failed += 1
                logger.error(f"Migrating {filename} failed: {e}")
                progress_bar.write(click.style(f"❌ {filename}: {e}", fg="red"), file=click.get_text_stream("stderr"))
            else:
                logger.debug(f"Wrote {output_file}")
            progress_bar.update(1)

    if not quiet:
        stats = migrator.stats
        click.echo(
            f"✅ Processed {stats['files_processed']} file(s), "
            f"migrated {stats['sections_migrated']} section(s), "
            f"{failed} failure(s)",
            err=True,
        )

    return failed
