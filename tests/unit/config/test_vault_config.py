"""Tests for Config sources."""

from pathlib import Path

import pytest

from vault.config import Config


class TestConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)  # no stray .env
        monkeypatch.delenv("VAULT_CONFIG_FILE", raising=False)

        config = Config()

        assert config.database.url.startswith("sqlite+aiosqlite:///")
        assert config.database.auto_migrate is True
        assert config.backup.directory == Path("backups")
        assert config.backup.enabled is True
        assert config.export.path == Path("export.txt")

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VAULT_DATABASE__URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.setenv("VAULT_BACKUP__ENABLED", "false")

        config = Config()

        assert config.database.url == "sqlite+aiosqlite:///:memory:"
        assert config.backup.enabled is False

    def test_yaml_config_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / "vault.yaml"
        config_file.write_text("backup:\n  directory: /srv/vault/backups\n")
        monkeypatch.setenv("VAULT_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.backup.directory == Path("/srv/vault/backups")

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / "vault.yaml"
        config_file.write_text("export:\n  path: from-yaml.txt\n")
        monkeypatch.setenv("VAULT_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("VAULT_EXPORT__PATH", "from-env.txt")

        assert Config().export.path == Path("from-env.txt")

    def test_unprefixed_env_vars_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("VAULT_CONFIG_FILE", raising=False)
        monkeypatch.setenv("PATH", "/usr/local/bin:/usr/bin")
        monkeypatch.setenv("URL", "postgresql://elsewhere/db")
        monkeypatch.setenv("ENABLED", "false")
        monkeypatch.setenv("DIRECTORY", "/tmp/elsewhere")

        config = Config()

        assert config.export.path == Path("export.txt")
        assert config.database.url.startswith("sqlite+aiosqlite:///")
        assert config.backup.enabled is True
        assert config.backup.directory == Path("backups")
