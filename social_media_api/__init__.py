"""
Top‑level package for the Social Media API.

The package itself exports nothing; the web application lives in the
``app`` subpackage (``social_media_api.app.main:app``) and the command
line entry point in ``social_media_api.cli``.
"""

__all__ = []
