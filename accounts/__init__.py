"""Accounts core: user and session persistence."""

__version__ = "0.1.0"
