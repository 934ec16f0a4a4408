"""
Errors raised by realtime store clients.

Callers decide severity: a failure on a whole collection aborts a run,
a failure on a single record is collected and reported.
"""


class StoreError(Exception):
    """Base class for all store failures."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class StoreConnectionError(StoreError):
    """A session with the store could not be established or was lost."""


class StoreReadError(StoreError):
    """Reading a path failed."""


class StoreWriteError(StoreError):
    """Patching or deleting a path failed."""


class RecordNotFoundError(StoreError):
    """An expected path does not exist."""
