"""
Exceptions shared by the storage and service layers.
"""


class StorageError(Exception):
    """The database could not complete an operation.

    Raised by the repositories in place of the underlying
    ``sqlite3.Error``, which stays available as ``__cause__``.
    """
