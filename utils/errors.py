"""
utils/errors.py
---------------
Error taxonomy for the data-access layer.

Domain errors (invalid input, duplicates, missing rows) are raised by the
repositories. StoreError is raised only by the executor and wraps the
underlying psycopg2 error.
"""


class JoblyError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(JoblyError):
    """The caller supplied data that cannot be turned into a query."""


class DuplicateEntityError(JoblyError):
    """A record with the same natural key already exists."""


class NotFoundError(JoblyError):
    """The targeted record does not exist."""


class StoreError(JoblyError):
    """The database failed to run a statement (connectivity, constraints)."""
