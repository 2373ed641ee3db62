"""Utility functions and helpers for podfeed."""

from podfeed.utils.errors import (
    ConfigError,
    FeedError,
    FeedLoadError,
    FeedNotFoundError,
    InvalidConfigError,
    PodfeedError,
)
from podfeed.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodfeedError",
    "ConfigError",
    "InvalidConfigError",
    "FeedError",
    "FeedNotFoundError",
    "FeedLoadError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
