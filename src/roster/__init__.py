"""Roster - student record management."""

__version__ = "0.1.0"
