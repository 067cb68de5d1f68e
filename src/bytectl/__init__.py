"""bytectl: byte-level bitwise operations and CLI."""

__version__ = "0.1.0"
