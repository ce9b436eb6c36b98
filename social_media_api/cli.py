"""Command line entry point for the Social Media API.

Usage:
    social-media-api serve [--host HOST] [--port PORT]
    social-media-api init-db [--db PATH] [--reset]

``serve`` starts the API with Uvicorn.  ``init-db`` applies pending
migrations to the SQLite database; with ``--reset`` the account and
message tables are dropped first.
"""

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.core.db import get_database_path, init_db, reset_db


async def serve(host: str, port: int) -> None:
    """Run the API until interrupted."""
    config = Config(
        app="social_media_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="social-media-api", description="Social Media API (SQLite).")
    sub = ap.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Start the HTTP server")
    serve_p.add_argument("--host", default=settings.host, help=f"Bind address (default {settings.host})")
    serve_p.add_argument("--port", type=int, default=settings.port, help=f"Port (default {settings.port})")

    db_p = sub.add_parser("init-db", help="Create or migrate the database")
    db_p.add_argument("--db", help="Path to the SQLite DB file (overrides DATABASE_URL)")
    db_p.add_argument("--reset", action="store_true", help="Drop accounts and messages first")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        try:
            asyncio.run(serve(args.host, args.port))
        except (KeyboardInterrupt, SystemExit):
            pass
        return 0

    if args.db:
        settings.database_url = os.path.abspath(args.db)
    if args.reset:
        reset_db()
        print(f"[+] Database reset: {get_database_path()}")
    else:
        init_db()
        print(f"[+] Database ready: {get_database_path()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
