#!/usr/bin/env python3
"""
Example script demonstrating programmatic use of the migration toolkit.

This script migrates the bundled telegraf.conf in memory and prints the
result, then shows the sections the configuration was split into.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from telegraf_migration_toolkit import ConfigMigrator, build_default_registry
from telegraf_migration_toolkit.shared.logging import setup_logging


def main():
    setup_logging(log_level="INFO")
    logger = logging.getLogger("migrate_example")

    config_file = Path(__file__).parent / "telegraf.conf"
    data = config_file.read_bytes()

    migrator = ConfigMigrator(build_default_registry(), logger=logger)

    print("Sections:")
    for section in migrator.split(data):
        print(f"  line {section.begin:3d}: {section.name}")

    print("\nMigrated configuration:")
    print(migrator.migrate_bytes(data).decode("utf-8"))


if __name__ == "__main__":
    main()
