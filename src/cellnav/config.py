"""Configuration loading and defaults for cellnav."""

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .history import DEFAULT_CAPACITY


def get_config_dir() -> Path:
    """Get the cellnav config directory (XDG-style)."""
    return Path.home() / ".config" / "cellnav"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_data_dir() -> Path:
    """Get the default data directory for logs."""
    return Path.home() / ".local" / "share" / "cellnav"


def toml_string(value: object) -> str:
    """Quote a value as a TOML basic string.

    JSON string escapes are a subset of the TOML basic string escapes.
    """
    return json.dumps(str(value), ensure_ascii=False)


@dataclass
class HistoryConfig:
    """Navigation history configuration."""

    capacity: int = DEFAULT_CAPACITY


@dataclass
class Config:
    """Application configuration."""

    notebook: Path = field(default_factory=lambda: Path.home() / "notebook.md")
    data_directory: Path = field(default_factory=get_default_data_dir)
    log_level: str = "INFO"
    history: HistoryConfig = field(default_factory=HistoryConfig)

    def get_log_path(self) -> Path:
        """Get the log file path based on configured data directory."""
        return self.data_directory / "cellnav.log"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.data_directory.mkdir(parents=True, exist_ok=True)
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        notebook = Path(data.get("notebook", "~/notebook.md")).expanduser()

        data_dir = data.get("data_directory", str(get_default_data_dir()))
        data_directory = Path(data_dir).expanduser()

        log_level = str(data.get("log_level", "INFO")).upper()

        # Non-positive or non-integer capacity falls back to the default
        history_data = data.get("history", {})
        capacity = history_data.get("capacity", DEFAULT_CAPACITY)
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            capacity = DEFAULT_CAPACITY

        config = cls(
            notebook=notebook,
            data_directory=data_directory,
            log_level=log_level,
            history=HistoryConfig(capacity=capacity),
        )

        config.data_directory.mkdir(parents=True, exist_ok=True)

        return config

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# cellnav Configuration',
            '',
            '# Notebook opened when no path is given on the command line',
            f'notebook = {toml_string(self.notebook)}',
            '',
            '# Directory for the log file (cellnav.log)',
            '# Default: ~/.local/share/cellnav',
            f'data_directory = {toml_string(self.data_directory)}',
            '',
            '# DEBUG, INFO, WARNING or ERROR',
            f'log_level = {toml_string(self.log_level)}',
            '',
            '# Back navigation history',
            '[history]',
            f'capacity = {self.history.capacity}  # locations kept before the oldest is dropped',
        ]

        config_path.write_text("\n".join(lines) + "\n")
