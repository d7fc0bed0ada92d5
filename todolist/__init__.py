"""A small to-do list kept in a plain text file, with a command-line interface."""

__version__ = "0.1.0"