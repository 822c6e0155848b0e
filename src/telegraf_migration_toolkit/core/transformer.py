"""
Config migrator for Telegraf configuration files.

This module contains the ConfigMigrator class which splits a configuration into
sections, replaces deprecated plugin sections using the migration registry and
writes the result while leaving all other text untouched.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..shared.file_utils import get_output_file_path
from .document import parse
from .errors import MalformedConfigError, MigrationError, SectionMigrationError
from .registry import MigrationRegistry
from .sections import Section, assign_text_to_sections, extract_sections, render_sections, write_sections


class ConfigMigrator:
    """Migrates deprecated plugin sections of Telegraf configuration files."""

    def __init__(
        self,
        registry: MigrationRegistry,
        logger: Optional[logging.Logger] = None,
        debug: bool = False,
    ):
        """Initialize the ConfigMigrator.

        Args:
            registry (MigrationRegistry): Catalog of migrations, frozen before use
            logger (Logger): Logger instance (optional)
            debug (bool): Dump every migrated section at DEBUG level

        Raises:
            ValueError: If the registry is not frozen
        """
        if not registry.frozen:
            raise ValueError("Migration registry must be frozen before migrating")

        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)
        self.debug = debug

        self.stats: Dict[str, Any] = {
            "files_processed": 0,
            "sections_found": 0,
            "sections_migrated": 0,
            "errors": [],
        }

    def split(self, data: bytes) -> List[Section]:
        """Parse the configuration and attach the source text to its sections.

        Raises:
            ConfigParseError: If the data is not valid TOML
            MalformedConfigError: If the document has an unexpected shape or is empty
        """
        root = parse(data)
        sections = extract_sections(root)
        if not sections:
            raise MalformedConfigError("no TOML configuration found")

        sections = assign_text_to_sections(data, sections)
        found = sum(1 for section in sections if section.content is not None)
        self.stats["sections_found"] += found
        self.logger.debug(f"Split configuration into {found} sections")
        return sections

    def migrate_sections(self, sections: List[Section]) -> int:
        """Replace the text of every section with a registered migration.

        Args:
            sections: Sections with their source text attached

        Returns:
            int: Number of migrated sections

        Raises:
            SectionMigrationError: If a migration fails
        """
        migrated = 0
        for section in sections:
            migrate = self.registry.lookup(section.name)
            if migrate is None:
                continue

            self.logger.info(f"Migrating plugin '{section.name}' in line {section.begin}...")
            try:
                result = migrate(section.content)
                if not isinstance(result, (bytes, bytearray)):
                    raise MigrationError(f"migration returned {type(result).__name__}, expected bytes")
            except Exception as e:
                raise SectionMigrationError(section.name, section.begin, e) from e

            # The comment documenting the plugin stays in front of its replacement
            section.raw = bytearray(section.comment + result)
            migrated += 1

            if self.debug:
                self._dump_section(section)

        self.stats["sections_migrated"] += migrated
        return migrated

    def _dump_section(self, section: Section) -> None:
        self.logger.debug("=" * 49)
        self.logger.debug(section.name)
        self.logger.debug("-" * 49)
        self.logger.debug(section.raw.decode("utf-8", errors="replace"))
        self.logger.debug("-" * 49)
        if section.content is not None:
            for key, value in section.content.fields.items():
                self.logger.debug(f"{key}: {value!r} ({type(value).__name__})")
        self.logger.debug("=" * 49)

    def migrate_bytes(self, data: bytes) -> bytes:
        """Run the full migration on in-memory configuration data."""
        sections = self.split(data)
        self.migrate_sections(sections)
        return render_sections(sections)

    def migrate_file(self, input_file: Union[str, Path], output_file: Union[str, Path, None] = None) -> Path:
        """Migrate a configuration file and write the result.

        Args:
            input_file: Path of the configuration file
            output_file: Destination (optional, defaults to ``<input_file>.migrated``)

        Returns:
            Path: The written output file

        Raises:
            OSError: If reading the input or writing the output fails
            ConfigParseError: If the input is not valid TOML
            MalformedConfigError: If the input has an unexpected shape
            SectionMigrationError: If a migration fails
        """
        input_path = Path(input_file)
        self.logger.info(f"Processing {input_path}")

        try:
            data = input_path.read_bytes()
            sections = self.split(data)
            migrated = self.migrate_sections(sections)

            output_path = Path(output_file) if output_file else get_output_file_path(input_path)
            with open(output_path, "wb") as f:
                write_sections(sections, f)
        except Exception as e:
            self.stats["errors"].append(f"{input_path}: {e}")
            raise

        self.stats["files_processed"] += 1
        self.logger.info(f"Migrated {migrated} section(s), output written to {output_path}")
        return output_path
