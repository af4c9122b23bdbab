"""Tests for vozfin.config."""

import os
import stat
from pathlib import Path

import pytest

from vozfin.config import Settings, create_default_config, get_config_path, load_settings, save_config


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should honor XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "vozfin" / "config.toml"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults."""
        assert load_settings(tmp_path / "missing.toml") == Settings()

    def test_default_config_round_trip(self, tmp_path: Path) -> None:
        """Should create a private config file that loads as defaults."""
        path = tmp_path / "vozfin" / "config.toml"
        create_default_config(path)

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
        settings = load_settings(path)
        assert settings == Settings()
        assert settings.retry_delay == 0.1

    def test_partial_config(self, tmp_path: Path) -> None:
        """Should merge given keys with defaults."""
        path = tmp_path / "config.toml"
        save_config({"voice": {"origin": "https://financas.example.com"}}, path)

        settings = load_settings(path)

        assert settings.origin == "https://financas.example.com"
        assert settings.language == "pt-BR"
        assert settings.log_level == "WARNING"

    def test_invalid_retry_delay(self, tmp_path: Path) -> None:
        """Should reject a negative retry delay."""
        path = tmp_path / "config.toml"
        save_config({"voice": {"retry_delay_ms": -5}}, path)

        with pytest.raises(ValueError, match="retry_delay_ms"):
            load_settings(path)
