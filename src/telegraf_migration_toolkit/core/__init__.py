"""
Core functionality for the telegraf migration toolkit.

This module contains the document parser, the section splitting, the
migration registry and the ConfigMigrator.
"""

from .document import Table, parse
from .errors import (
    ConfigParseError,
    DuplicateMigrationError,
    MalformedConfigError,
    MigrationError,
    MigrationToolkitError,
    OutputCollisionError,
    SectionMigrationError,
)
from .registry import MigrationFunc, MigrationRegistry
from .sections import Section, assign_text_to_sections, extract_sections, render_sections
from .transformer import ConfigMigrator

__all__ = [
    'Table',
    'parse',
    'Section',
    'extract_sections',
    'assign_text_to_sections',
    'render_sections',
    'MigrationFunc',
    'MigrationRegistry',
    'ConfigMigrator',
    'MigrationToolkitError',
    'ConfigParseError',
    'MalformedConfigError',
    'MigrationError',
    'SectionMigrationError',
    'DuplicateMigrationError',
    'OutputCollisionError',
]
