"""Namespace import hygiene check for PHP source files."""

__version__ = "0.1.0"
