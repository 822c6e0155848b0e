"""
Entry point for the telegraf-migration-toolkit package.

This module is called when the package is run as a script:
    python -m telegraf_migration_toolkit
"""

import sys
from telegraf_migration_toolkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
