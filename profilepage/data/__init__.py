"""Data sources for profile pages."""

from profilepage.data.base import ProfileDataSource
from profilepage.data.sqlite_source import SQLiteDataSource

__all__ = ["ProfileDataSource", "SQLiteDataSource"]
