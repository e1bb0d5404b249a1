"""Cheese catalog search and feed ranking service."""

__version__ = "0.1.0"
