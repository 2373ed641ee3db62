"""Configuration for podfeed."""
