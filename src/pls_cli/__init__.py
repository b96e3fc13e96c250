"""pls - a friendly personal task tracker for your terminal."""

__version__ = "0.1.0"
