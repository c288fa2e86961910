"""Garage: people, the vehicles they own, and queries over both."""

__version__ = "0.1.0"
