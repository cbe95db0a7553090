"""Parse and validate .cub scene files and read XPM texture images."""

__version__ = "0.1.0"