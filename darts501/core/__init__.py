"""
Core module - shared constants, enums, and configuration.
"""
from .types import (
    STARTING_SCORE,
    DARTS_PER_THROW,
    PlayerId,
    Ring,
)
from .io_utils import load_yaml
from .config_loader import Config, DEFAULT_CONFIG_PATH

__all__ = [
    # Types
    "STARTING_SCORE",
    "DARTS_PER_THROW",
    "PlayerId",
    "Ring",
    # I/O
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
]
