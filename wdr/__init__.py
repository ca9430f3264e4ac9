"""wdr -- remember directories by name and recall them later."""

__version__ = "0.1.0"
