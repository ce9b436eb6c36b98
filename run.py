"""Entry point for running the Social Media API from a checkout.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8080``); see
``social_media_api.app.core.config`` for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from social_media_api.app.core.config import settings
from social_media_api.app.core.logging_config import setup_logging
from social_media_api.cli import serve


async def main() -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    logging.getLogger(__name__).info("Starting API on %s:%s", settings.host, settings.port)
    await serve(settings.host, settings.port)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
