"""Addon updater: finds, version-checks and safely installs addon archives."""

__version__ = "1.0.0"
