"""Persistence collaborator implementations (see core.ports.Preferences)."""

from .store import SQLitePreferences

__all__ = ["SQLitePreferences"]
