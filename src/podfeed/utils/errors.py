"""Custom exceptions for podfeed."""


class PodfeedError(Exception):
    """Base exception for all podfeed errors."""

    pass


class ConfigError(PodfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class FeedError(PodfeedError):
    """Feed description errors."""

    pass


class FeedNotFoundError(FeedError):
    """Feed description file not found."""

    pass


class FeedLoadError(FeedError):
    """Feed description could not be read or validated."""

    pass
