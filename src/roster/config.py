"""Configuration loading for Roster."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "roster.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class LoggingConfig:
    """Log output settings. See roster.logging.setup_logging."""

    dir: str = "logs"
    file: str = "roster.log"
    level: str = "INFO"
    console: bool = True


@dataclass
class RosterConfig:
    """Roster application configuration."""

    name: str = "roster"
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> RosterConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a value is out of range or of the wrong type.
        """
        server_data = _section(data, "server")
        try:
            port = int(server_data.get("port", 8000))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"server.port must be an integer: {e}") from e
        if not 1 <= port <= 65535:
            raise ConfigError(f"server.port must be between 1 and 65535, got {port}")
        server = ServerConfig(
            host=str(server_data.get("host", "127.0.0.1")),
            port=port,
        )

        logging_data = _section(data, "logging")
        level = str(logging_data.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level}")
        logging_config = LoggingConfig(
            dir=str(logging_data.get("dir", "logs")),
            file=str(logging_data.get("file", "roster.log")),
            level=level,
            console=bool(logging_data.get("console", True)),
        )

        return cls(
            name=str(data.get("name", "roster")),
            server=server,
            logging=logging_config,
            root_path=root_path,
        )

    def get_log_dir(self) -> Path:
        """Get absolute path to the log directory.

        Relative directories are resolved against the config file location.
        """
        log_dir = Path(self.logging.dir)
        if log_dir.is_absolute():
            return log_dir
        return self.root_path / log_dir


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def load_config(config_path: Path | str) -> RosterConfig:
    """Load Roster configuration from a YAML file.

    Args:
        config_path: Path to roster.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RosterConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find roster.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to roster.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path)

    current = start_path.resolve()

    while current != current.parent:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        current = current.parent

    # Check root
    config_path = current / CONFIG_FILENAME
    if config_path.exists():
        return config_path

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")
