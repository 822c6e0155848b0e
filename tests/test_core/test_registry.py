"""
Tests for the migration registry.
"""

import pytest

from telegraf_migration_toolkit.core.errors import DuplicateMigrationError
from telegraf_migration_toolkit.core.registry import MigrationRegistry
from telegraf_migration_toolkit.migrations import BUILTIN_MIGRATIONS, build_default_registry


def migrate_noop(table):
    return b""


class TestMigrationRegistry:
    """Test cases for MigrationRegistry."""

    def test_register_and_lookup(self):
        registry = MigrationRegistry()
        registry.register("inputs.olddriver", migrate_noop)

        assert registry.lookup("inputs.olddriver") is migrate_noop
        assert "inputs.olddriver" in registry
        assert len(registry) == 1

    def test_lookup_missing(self):
        registry = MigrationRegistry().freeze()
        assert registry.lookup("inputs.cpu") is None
        assert "inputs.cpu" not in registry

    def test_duplicate_registration_fails(self):
        registry = MigrationRegistry()
        registry.register("inputs.olddriver", migrate_noop)

        with pytest.raises(DuplicateMigrationError, match="inputs.olddriver") as exc_info:
            registry.register("inputs.olddriver", lambda table: b"other")

        assert exc_info.value.name == "inputs.olddriver"
        assert registry.lookup("inputs.olddriver") is migrate_noop

    def test_header_cannot_be_registered(self):
        registry = MigrationRegistry()
        with pytest.raises(ValueError, match="header"):
            registry.register("header", migrate_noop)

    def test_empty_name_cannot_be_registered(self):
        with pytest.raises(ValueError):
            MigrationRegistry().register("", migrate_noop)

    def test_frozen_registry_rejects_registration(self):
        registry = MigrationRegistry()
        registry.register("inputs.olddriver", migrate_noop)
        assert registry.freeze() is registry
        assert registry.frozen

        with pytest.raises(RuntimeError, match="frozen"):
            registry.register("inputs.other", migrate_noop)
        assert registry.lookup("inputs.olddriver") is migrate_noop

    def test_names_sorted(self):
        registry = MigrationRegistry()
        registry.register("outputs.b", migrate_noop)
        registry.register("inputs.a", migrate_noop)
        assert registry.names() == ["inputs.a", "outputs.b"]


class TestDefaultRegistry:
    """Test cases for the built-in migration catalog."""

    def test_builtin_names_are_unique(self):
        names = [name for name, _ in BUILTIN_MIGRATIONS]
        assert len(names) == len(set(names))

    def test_build_default_registry(self):
        registry = build_default_registry()

        assert registry.frozen
        assert len(registry) == len(BUILTIN_MIGRATIONS)
        assert registry.names() == [
            "inputs.KNXListener",
            "inputs.http_listener",
            "inputs.httpjson",
            "inputs.io",
            "outputs.riemann_legacy",
        ]
        assert "header" not in registry

    def test_duplicate_builtin_fails_at_build_time(self, monkeypatch):
        import telegraf_migration_toolkit.migrations as migrations

        monkeypatch.setattr(
            migrations,
            "BUILTIN_MIGRATIONS",
            BUILTIN_MIGRATIONS + [("inputs.io", migrate_noop)],
        )
        with pytest.raises(DuplicateMigrationError):
            migrations.build_default_registry()
