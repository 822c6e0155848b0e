"""
Helpers shared by the plugin migrations.

Migrations build the replacement plugin as a tomlkit document and render it
to text, so every migrated section is valid TOML on its own.
"""

from typing import Any, Callable, Dict

import tomlkit

from ..core.document import Table
from ..core.errors import MigrationError


def _is_table(value: Any) -> bool:
    return isinstance(value, dict) or (
        isinstance(value, list) and bool(value) and all(isinstance(item, dict) for item in value)
    )


def create_toml_struct(category: str, plugin: str, fields: Dict[str, Any]) -> tomlkit.TOMLDocument:
    """Create a document holding a single ``[[category.plugin]]`` instance."""
    instance = tomlkit.table()
    # Plain values must precede sub-tables, otherwise they would end up inside them
    for key, value in fields.items():
        if not _is_table(value):
            instance.add(key, value)
    for key, value in fields.items():
        if _is_table(value):
            instance.add(key, value)

    plugins = tomlkit.aot()
    plugins.append(instance)

    group = tomlkit.table(is_super_table=True)
    group.add(plugin, plugins)

    doc = tomlkit.document()
    doc.add(category, group)
    return doc


def render_plugin(category: str, plugin: str, fields: Dict[str, Any]) -> bytes:
    """Render a plugin instance as replacement text for a section.

    A blank line is appended to separate the plugin from the following section.
    """
    text = tomlkit.dumps(create_toml_struct(category, plugin, fields))
    return (text.strip("\n") + "\n\n").encode("utf-8")


def rename_plugin(category: str, plugin: str) -> Callable[[Table], bytes]:
    """Create a migration for a plugin that was renamed without option changes."""

    def migrate(table: Table) -> bytes:
        return render_plugin(category, plugin, table.to_dict())

    migrate.__name__ = f"migrate_to_{category}_{plugin}"
    return migrate


def pop_string(fields: Dict[str, Any], key: str, default: str = "") -> str:
    """Remove ``key`` from ``fields`` and return it as a string option.

    Raises:
        MigrationError: If the option is present but not a string
    """
    value = fields.pop(key, default)
    if not isinstance(value, str):
        raise MigrationError(f"option '{key}' must be a string, got {type(value).__name__}")
    return value
