"""Exceptions raised by the dbadmin core."""


class DatabaseAdminError(Exception):
    """Base exception for dbadmin errors."""

    pass


class DatabaseNotConnectedError(DatabaseAdminError):
    """Raised when a metadata source is used before it is connected."""

    pass


class UnknownInfoPageError(DatabaseAdminError, KeyError):
    """Raised when an engine is asked for an info page it does not provide."""

    pass
