"""REST API for Roster."""

from roster.api.app import create_app

__all__ = ["create_app"]
