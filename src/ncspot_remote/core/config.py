"""
Configuration management for ncspot-remote
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

# Environment variable overrides
ENV_SOCKET = "NCSPOT_REMOTE_SOCKET"
ENV_PROCESS = "NCSPOT_REMOTE_PROCESS"
ENV_LOG_LEVEL = "NCSPOT_REMOTE_LOG_LEVEL"

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class PlayerConfig:
    """Configuration for locating the running player."""

    process_name: str = "ncspot"
    socket_path: Optional[str] = None  # Derived from the user id when unset


@dataclass
class FallbackConfig:
    """Configuration for the media-key fallback."""

    enabled: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"  # Quiet on success
    log_file: Optional[str] = None  # No file sink unless set

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If the level is not a loguru level name
        """
        if not isinstance(self.level, str) or self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. "
                f"Valid levels are: {sorted(VALID_LOG_LEVELS)}"
            )


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    fallback: FallbackConfig = field(default_factory=FallbackConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "ncspot-remote"
    return Path.home() / ".config" / "ncspot-remote"


def get_config_path() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.toml"


def _section(toml_data: dict, name: str) -> dict:
    section = toml_data.get(name, {})
    if not isinstance(section, dict):
        logger.warning(f"Ignoring [{name}]: expected a table, got {type(section).__name__}")
        return {}
    return section


def _typed(section: dict, name: str, key: str, expected: type, default):
    """Read section[key], keeping default when it is missing or mistyped."""
    value = section.get(key, default)
    # bool is an int subclass; only accept the exact type asked for
    if value is not None and type(value) is not expected:
        logger.warning(
            f"Ignoring {name}.{key}: expected {expected.__name__}, "
            f"got {type(value).__name__}"
        )
        return default
    return value


def _apply_toml(config: Config, toml_data: dict) -> Config:
    if "player" in toml_data:
        player_data = _section(toml_data, "player")
        socket_path = _typed(player_data, "player", "socket_path", str, None)
        config.player = PlayerConfig(
            process_name=_typed(
                player_data, "player", "process_name", str, config.player.process_name
            ),
            socket_path=str(Path(socket_path).expanduser()) if socket_path else None,
        )

    if "fallback" in toml_data:
        fallback_data = _section(toml_data, "fallback")
        config.fallback = FallbackConfig(
            enabled=_typed(
                fallback_data, "fallback", "enabled", bool, config.fallback.enabled
            ),
        )

    if "logging" in toml_data:
        logging_data = _section(toml_data, "logging")
        log_file = _typed(logging_data, "logging", "log_file", str, None)
        config.logging = LoggingConfig(
            level=_typed(logging_data, "logging", "level", str, config.logging.level),
            log_file=str(Path(log_file).expanduser()) if log_file else None,
        )

    return config


def _apply_env(config: Config) -> Config:
    socket_path = os.environ.get(ENV_SOCKET)
    if socket_path:
        config.player.socket_path = socket_path

    process_name = os.environ.get(ENV_PROCESS)
    if process_name:
        config.player.process_name = process_name

    level = os.environ.get(ENV_LOG_LEVEL)
    if level:
        config.logging.level = level

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    The file is never created. Environment variables override TOML values:
    - NCSPOT_REMOTE_SOCKET
    - NCSPOT_REMOTE_PROCESS
    - NCSPOT_REMOTE_LOG_LEVEL

    Args:
        config_path: Explicit config file (default: XDG config location)

    Returns:
        Populated Config
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config = Config()
    config_path = config_path or get_config_path()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
            config = _apply_toml(config, toml_data)
        except (tomllib.TOMLDecodeError, OSError) as e:
            logger.warning(f"Error loading config from {config_path}: {e}")
            logger.warning("Using default configuration.")
            config = Config()

    config = _apply_env(config)

    try:
        config.logging.validate()
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Invalid logging configuration: {e}")
        config.logging = LoggingConfig(log_file=config.logging.log_file)

    return config
