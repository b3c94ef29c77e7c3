"""Small versions of the cat, cp, echo, head and mv commands, usable as a library."""

__version__ = "0.1.0"