"""
Telegraf Migration Toolkit

A tool for migrating deprecated plugins in Telegraf configuration files.
"""

__version__ = "1.0.0"

from .cli import main
from .core import (
    ConfigMigrator,
    MigrationRegistry,
    Section,
    assign_text_to_sections,
    extract_sections,
    parse,
    render_sections,
)
from .execution import execute_migrate_files
from .migrations import build_default_registry
from .shared.logging import setup_logging

__all__ = [
    # Core functionality
    "ConfigMigrator",
    "MigrationRegistry",
    "Section",
    "assign_text_to_sections",
    "extract_sections",
    "parse",
    "render_sections",
    "build_default_registry",
    "setup_logging",
    # CLI functionality
    "main",
    # Execution
    "execute_migrate_files",
]
