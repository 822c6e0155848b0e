"""
Exceptions raised by the telegraf migration toolkit.

Per-file failures (parse, shape and migration errors) abort the current file
only. A duplicate migration is a defect in the bundled catalog and is raised
while the registry is built, before any file is read.
"""

from typing import Optional


class MigrationToolkitError(Exception):
    """Base class for all toolkit errors."""


class ConfigParseError(MigrationToolkitError, ValueError):
    """The configuration could not be decoded as UTF-8 TOML."""


class MalformedConfigError(MigrationToolkitError, ValueError):
    """A top-level field or category child does not have the expected shape."""


class MigrationError(MigrationToolkitError):
    """A migration function could not convert the table it was given."""


class DuplicateMigrationError(MigrationToolkitError):
    """Two migrations were registered under the same qualified name."""

    def __init__(self, name: str):
        super().__init__(f"plugin migration function already registered for '{name}'")
        self.name = name


class SectionMigrationError(MigrationToolkitError):
    """Migrating a single section failed.

    Args:
        section: Qualified section name, e.g. ``inputs.httpjson``
        line: Line of the section in the source file
        cause: The exception raised by the migration function
    """

    def __init__(self, section: str, line: int, cause: Optional[BaseException] = None):
        message = f"migrating '{section}' (line {line}) failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.section = section
        self.line = line
        self.cause = cause


class OutputCollisionError(MigrationToolkitError):
    """Two inputs of one run would be written to the same output file."""

    def __init__(self, output_file, first_input):
        super().__init__(f"output '{output_file}' was already written for '{first_input}'")
        self.output_file = output_file
        self.first_input = first_input
