"""
Catalog of plugin migrations.

The registry is filled once at startup and frozen before the first file is
processed. After that it is only read.
"""

from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .document import Table
from .errors import DuplicateMigrationError
from .sections import HEADER_SECTION

# Converts the parsed table of a deprecated section into replacement text
MigrationFunc = Callable[[Table], bytes]


class MigrationRegistry:
    """Maps qualified section names (``inputs.httpjson``) to migration functions."""

    def __init__(self):
        self._migrations: Mapping[str, MigrationFunc] = {}
        self._frozen = False

    def register(self, name: str, func: MigrationFunc) -> None:
        """Add a migration function.

        Raises:
            DuplicateMigrationError: If a migration is already registered for ``name``
            ValueError: If ``name`` is empty or the reserved header section name
            RuntimeError: If the registry is frozen
        """
        if self._frozen:
            raise RuntimeError(f"cannot register '{name}': migration registry is frozen")
        if not name or name == HEADER_SECTION:
            raise ValueError(f"invalid migration name '{name}'")
        if name in self._migrations:
            raise DuplicateMigrationError(name)
        self._migrations[name] = func

    def freeze(self) -> "MigrationRegistry":
        self._migrations = MappingProxyType(self._migrations)
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Optional[MigrationFunc]:
        return self._migrations.get(name)

    def names(self) -> List[str]:
        return sorted(self._migrations)

    def __contains__(self, name: str) -> bool:
        return name in self._migrations

    def __len__(self) -> int:
        return len(self._migrations)
