"""
Console configuration management.

Handles loading, saving and validating the console's settings: which
crontab program to run, whose crontab to edit, colour output and logging.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, List

from dotenv import load_dotenv

from cronmenu.store import CrontabStore

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_default_log_file() -> str:
    """Get default log file path from environment or default."""
    if os.environ.get('CRONMENU_LOG_DIR'):
        return str(Path(os.environ['CRONMENU_LOG_DIR']).expanduser() / "cronmenu.log")
    return "~/.cronmenu/logs/cronmenu.log"


def _parse_bool(value, name: str) -> bool:
    """Accept JSON booleans and the usual true/false spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    if isinstance(value, int):
        return value != 0
    raise ValueError(f"Invalid value for '{name}': {value!r}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: str = None  # Set dynamically in __post_init__

    def __post_init__(self):
        if self.file is None:
            self.file = _get_default_log_file()


class ConsoleConfig:
    """
    Console configuration manager.

    Configuration path priority:
    1. Explicit config_path argument
    2. CRONMENU_CONFIG_PATH environment variable
    3. Default: ~/.cronmenu/config.json

    After the file is read, CRONMENU_CRONTAB, CRONMENU_USER and NO_COLOR
    override the stored values.
    """

    DEFAULT_CONFIG_PATH = Path.home() / ".cronmenu" / "config.json"

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize console configuration.

        Args:
            config_path: Path to configuration file. If None, uses env var or default.
        """
        if config_path:
            self.config_path = Path(config_path).expanduser()
        elif os.environ.get('CRONMENU_CONFIG_PATH'):
            self.config_path = Path(os.environ['CRONMENU_CONFIG_PATH']).expanduser()
        else:
            self.config_path = self.DEFAULT_CONFIG_PATH

        self.crontab_command: str = "crontab"
        self.user: Optional[str] = None
        self.color: bool = True
        self.logging: LoggingConfig = LoggingConfig()

        if self.config_path.exists():
            self.load()
        else:
            logger.debug(f"No config found at {self.config_path}, using defaults")

        self._apply_environment()

    def load(self):
        """Load configuration from JSON file."""
        try:
            with open(self.config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config from {self.config_path}: {e}")
            raise ValueError(f"Invalid config file {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid config file {self.config_path}: expected a JSON object, "
                f"got {type(data).__name__}"
            )

        self.crontab_command = data.get('crontab_command', self.crontab_command)
        self.user = data.get('user', self.user)
        if 'color' in data:
            self.color = _parse_bool(data['color'], 'color')

        if 'logging' in data:
            try:
                self.logging = LoggingConfig(**data['logging'])
            except TypeError as e:
                raise ValueError(f"Invalid logging section in {self.config_path}: {e}") from e

        logger.debug(f"Loaded configuration from {self.config_path}")

    def _apply_environment(self):
        if os.environ.get('CRONMENU_CRONTAB'):
            self.crontab_command = os.environ['CRONMENU_CRONTAB']
        if os.environ.get('CRONMENU_USER'):
            self.user = os.environ['CRONMENU_USER']
        if 'NO_COLOR' in os.environ:
            self.color = False

    def save(self):
        """Save configuration to JSON file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'crontab_command': self.crontab_command,
            'user': self.user,
            'color': self.color,
            'logging': asdict(self.logging),
        }

        with open(self.config_path, 'w') as f:
            json.dump(data, f, indent=2)

        logger.info(f"Saved configuration to {self.config_path}")

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.crontab_command, str) or not self.crontab_command.strip():
            errors.append("'crontab_command' must be a non-empty string")

        if self.user is not None and not str(self.user).strip():
            errors.append("'user' cannot be blank")

        if str(self.logging.level).upper() not in LOG_LEVELS:
            errors.append(
                f"Unknown logging level '{self.logging.level}' "
                f"(expected one of {', '.join(LOG_LEVELS)})"
            )

        return errors

    def create_store(self) -> CrontabStore:
        """Build the crontab store described by this configuration."""
        return CrontabStore(command=self.crontab_command, user=self.user)

    def __repr__(self):
        return f"ConsoleConfig(crontab={self.crontab_command}, user={self.user}, path={self.config_path})"
