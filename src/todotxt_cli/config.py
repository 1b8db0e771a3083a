"""Configuration management for the todotxt CLI."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

TODO_DIR_ENV = "TODO_DIR"
DEFAULT_TODO_FILE = "todo.txt"
DEFAULT_CONFIG_PATH = "~/.config/todotxt/config.yaml"


def _todo_dir_from_env() -> str:
    return os.environ.get(TODO_DIR_ENV, "")


@dataclass
class ConfigModel:
    """Global configuration model for the todotxt CLI."""

    # File locations; an empty todo_dir means the working directory
    todo_dir: str = field(default_factory=_todo_dir_from_env)
    todo_file: str = DEFAULT_TODO_FILE

    # Display preferences
    plain: bool = False  # turn off colors
    show_numbers: bool = True

    # Behavior settings
    confirm_actions: bool = True
    stamp_creation_date: bool = True  # "add" stamps today's date

    def __post_init__(self):
        """Post-initialization setup."""
        self.todo_dir = os.path.expanduser(self.todo_dir)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML.

        Unknown keys are ignored with a warning so an older binary can read a
        newer config file.
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning(f"Ignoring unknown config key: {key}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def get_todo_path(self, todo_file: Optional[str] = None) -> Path:
        """Get the path of the todo.txt file, optionally overriding its name."""
        return Path(self.todo_dir or ".") / (todo_file or self.todo_file)


class Config:
    """Configuration manager for config files."""

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_PATH).expanduser()

        config = ConfigModel()
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config = ConfigModel.from_yaml(f.read())
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            logger.debug(f"No config file at {config_path}, using defaults")

        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_PATH).expanduser()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
