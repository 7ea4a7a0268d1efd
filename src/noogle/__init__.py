"""Noogle static documentation pages."""

__version__ = "0.1.0"
