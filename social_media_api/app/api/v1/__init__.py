"""
Version 1 of the API.

Mounted at ``settings.api_prefix``, which is empty by default: existing
clients call ``/register`` and ``/messages`` without a version segment.
"""
