"""Custom exception hierarchy for profilepage."""


class ProfilePageError(Exception):
    """Base exception for all profilepage errors."""


class DataSourceError(ProfilePageError):
    """Data source operation failed."""
