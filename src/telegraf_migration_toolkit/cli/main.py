"""
CLI main execution functions.

This module contains the click command that migrates configuration files.
"""

import sys

import click

from ..core.errors import DuplicateMigrationError
from ..execution.migrate_operations import execute_migrate_files
from ..migrations import build_default_registry
from ..shared import globals
from ..shared.logging import setup_logging
from .validators import VALID_LOG_LEVELS, validate_log_level, validate_output_dir


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version='1.0.0', prog_name='telegraf-migration-toolkit')
@click.argument('files', nargs=-1, type=click.Path(dir_okay=False, path_type=str))
@click.option(
    '--debug',
    is_flag=True,
    help='Print debugging information (dumps every migrated section)'
)
@click.option(
    '--log-level', '-l',
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default='INFO',
    callback=validate_log_level,
    help='Set logging level (default: INFO)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help=f'Additionally write the log to this file (default: ${globals.LOG_FILE_ENV})'
)
@click.option(
    '--output-dir', '-o',
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    callback=validate_output_dir,
    help='Write migrated files to this directory instead of next to the input'
)
@click.option(
    '--quiet', '-q',
    is_flag=True,
    help='Do not show a progress bar or summary'
)
@click.pass_context
def cli(ctx, files, debug, log_level, log_file, output_dir, quiet):
    """
    Migrates deprecated plugins in Telegraf configuration files to the new
    recommended setup.

    Every FILE is written to FILE.migrated. Only deprecated plugin sections
    are rewritten, all other content including comments is kept as is.

    NOTE: There is NO GUARANTEE that the generated configuration is equivalent
    to the old configuration. Please check the resulting configuration and
    metrics!

    Examples:

    \b
    telegraf-migration-toolkit telegraf.conf
    telegraf-migration-toolkit --debug /etc/telegraf/telegraf.d/*.conf
    """
    if not files:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    logger = setup_logging(verbose=debug, log_level=log_level, log_file_path=log_file)

    if output_dir and not globals.set_global_output_directory(output_dir, logger):
        click.echo(f"❌ Error: Cannot use output directory {output_dir}", err=True)
        ctx.exit(1)

    try:
        registry = build_default_registry()
    except DuplicateMigrationError as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(2)

    logger.debug(f"Loaded {len(registry)} plugin migrations: {', '.join(registry.names())}")

    failed = execute_migrate_files(list(files), registry, debug=debug, quiet=quiet, logger=logger)
    ctx.exit(1 if failed else 0)


def main():
    """Main CLI entry point."""
    return cli()


if __name__ == '__main__':
    sys.exit(main())
