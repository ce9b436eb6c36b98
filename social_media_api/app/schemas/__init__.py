"""
Pydantic schema definitions for API payloads.

Request schemas describe what clients send; record schemas
(``AccountRead``, ``MessageRead``) are the immutable snapshots passed
between repositories, services and the HTTP layer.  Field names match
the JSON bodies exactly.
"""
