"""
Custom exceptions for the Plants API.
"""


class PlantsAPIError(Exception):
    """Base class for errors raised by the application."""
    pass


class StorageError(PlantsAPIError):
    """Raised when the underlying SQLite database fails.

    Wraps the original ``sqlite3.Error`` (available as ``__cause__``).
    """
    pass
