"""Unit tests for the migration script."""

from pathlib import Path

import pytest
from alembic import command

from scripts.run_migrations import alembic_config, head_revision, main

ROOT = Path(__file__).resolve().parents[3]


class TestAlembicConfig:
    """Tests for locating the repository's alembic setup."""

    def test_config_is_independent_of_cwd(self, tmp_path, monkeypatch):
        """The config points at this repository's migrations from any directory."""
        # Arrange
        monkeypatch.chdir(tmp_path)

        # Act
        config = alembic_config()

        # Assert
        assert Path(config.config_file_name) == ROOT / "alembic.ini"
        assert Path(config.get_main_option("script_location")) == ROOT / "migrations"

    def test_head_is_initial_schema(self):
        """The account schema has a single head."""
        assert head_revision(alembic_config()) == "3c1f0a9d7e42"


class TestMain:
    """Tests for the migration entry point."""

    def test_upgrades_to_head_by_default(self, monkeypatch):
        """Without arguments the schema is upgraded to head."""
        # Arrange
        seen = []
        monkeypatch.setattr(
            command, "upgrade", lambda config, target: seen.append((config, target))
        )

        # Act
        result = main([])

        # Assert
        assert result == 0
        assert seen[0][1] == "head"
        assert seen[0][0].get_main_option("script_location") == str(ROOT / "migrations")

    def test_upgrade_failure_propagates(self, monkeypatch):
        """A failed upgrade is re-raised."""
        # Arrange
        def fail(config, target):
            raise RuntimeError("database unreachable")

        monkeypatch.setattr(command, "upgrade", fail)

        # Act & Assert
        with pytest.raises(RuntimeError):
            main(["3c1f0a9d7e42"])
