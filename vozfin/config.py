"""Configuration file management for vozfin."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_LANGUAGE = "pt-BR"
DEFAULT_ORIGIN = "http://localhost"
DEFAULT_RETRY_DELAY_MS = 100
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved settings with defaults applied."""

    language: str = DEFAULT_LANGUAGE
    origin: str = DEFAULT_ORIGIN
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def retry_delay(self) -> float:
        """Retry delay in seconds."""
        return self.retry_delay_ms / 1000


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "vozfin" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the default configuration document."""
    return {
        "voice": {
            "language": DEFAULT_LANGUAGE,
            "origin": DEFAULT_ORIGIN,
            "retry_delay_ms": DEFAULT_RETRY_DELAY_MS,
        },
        "logging": {
            "level": DEFAULT_LOG_LEVEL,
        },
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults for a missing file or keys.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Resolved Settings.

    Raises:
        ValueError: If a value has the wrong type.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return Settings()

    voice = config.get("voice", {})
    logging_section = config.get("logging", {})

    retry_delay_ms = voice.get("retry_delay_ms", DEFAULT_RETRY_DELAY_MS)
    if not isinstance(retry_delay_ms, int) or retry_delay_ms < 0:
        raise ValueError(f"voice.retry_delay_ms must be a non-negative integer, got {retry_delay_ms!r}")

    return Settings(
        language=str(voice.get("language", DEFAULT_LANGUAGE)),
        origin=str(voice.get("origin", DEFAULT_ORIGIN)),
        retry_delay_ms=retry_delay_ms,
        log_level=str(logging_section.get("level", DEFAULT_LOG_LEVEL)),
    )
