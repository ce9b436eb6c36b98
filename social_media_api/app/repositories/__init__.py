"""
Storage accessors for the ``account`` and ``message`` tables.

Repositories run parameterized SQL and convert rows into schema
records.  A missing row is reported as ``None``; any database failure
is logged and re‑raised as ``StorageError`` so that the service layer
only ever deals with one exception type.
"""
