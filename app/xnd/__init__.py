"""xnd - a simple package manager for npm-compatible registries."""

__version__ = "1.0.0"
