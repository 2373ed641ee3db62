"""podfeed - Podcasting 2.0 RSS feed generator."""

__version__ = "0.1.0"
