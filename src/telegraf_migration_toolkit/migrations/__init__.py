"""
Built-in plugin migrations.

Every deprecated plugin that can be converted automatically is listed in
BUILTIN_MIGRATIONS under its qualified section name.
"""

from typing import List, Tuple

from ..core.registry import MigrationFunc, MigrationRegistry
from .common import create_toml_struct, rename_plugin, render_plugin
from .inputs_httpjson import migrate_httpjson
from .outputs_riemann_legacy import migrate_riemann_legacy

BUILTIN_MIGRATIONS: List[Tuple[str, MigrationFunc]] = [
    ("inputs.KNXListener", rename_plugin("inputs", "knx_listener")),
    ("inputs.http_listener", rename_plugin("inputs", "influxdb_listener")),
    ("inputs.httpjson", migrate_httpjson),
    ("inputs.io", rename_plugin("inputs", "diskio")),
    ("outputs.riemann_legacy", migrate_riemann_legacy),
]


def build_default_registry() -> MigrationRegistry:
    """Build and freeze the registry of all built-in migrations.

    Raises:
        DuplicateMigrationError: If two built-in migrations share a name
    """
    registry = MigrationRegistry()
    for name, func in BUILTIN_MIGRATIONS:
        registry.register(name, func)
    return registry.freeze()


__all__ = [
    "BUILTIN_MIGRATIONS",
    "build_default_registry",
    "create_toml_struct",
    "render_plugin",
    "rename_plugin",
]
