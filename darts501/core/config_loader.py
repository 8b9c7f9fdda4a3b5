"""
Configuration loader with validation and defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .io_utils import load_yaml

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


class Config:
    """
    Configuration container with defaults for logging and the scoreboard.

    Sections:
        logging: ``level`` name (any case) and ``format`` for the CLI
        scoreboard: ``column_width`` of the result tables, the
            ``placeholder`` mark on the pre-game row and the
            ``miss_label`` shown for a dart that hit nothing
    """

    DEFAULTS = {
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },

        # Result table rendering
        "scoreboard": {
            "column_width": 6,
            "placeholder": "-",  # Shown on the pre-game row
            "miss_label": "miss",  # Shown for a dart that hit nothing
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path is not None:
            config_path = Path(config_path)

        if config_path and config_path.exists():
            try:
                user_config = load_yaml(config_path)
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """
        Merge user config with defaults.

        Built-in sections (logging, scoreboard) are updated key by key; a
        built-in section that is not a mapping keeps its defaults. Other
        sections are stored as given.
        """
        for section, values in user_config.items():
            if section not in self.data:
                self.data[section] = values
            elif isinstance(values, dict):
                self.data[section].update(values)
            else:
                logger.warning(f"Ignoring config section '{section}': expected a mapping")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section, {})

    def log_level(self) -> int:
        """
        Numeric logging level from the ``logging.level`` setting.

        Names are case-insensitive; unknown names fall back to INFO.
        """
        name = str(self.get("logging", "level", "INFO")).upper()
        level = logging.getLevelName(name)

        if not isinstance(level, int):
            logger.warning(f"Unknown log level '{name}', using INFO")
            return logging.INFO
        return level
