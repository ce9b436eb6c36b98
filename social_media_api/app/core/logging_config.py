"""
Logging setup for the Social Media API.

Services log every rejected request at INFO together with the reason
the HTTP response leaves out (empty username, text too long, unknown
author, ...).  Storage failures are logged at ERROR with a traceback
by the repositories, and undecodable requests at WARNING by the
application.  ``setup_logging`` sends all of it to the console and,
when ``LOG_FILE`` is set, to a file as well.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Calls after the first one, e.g. from a second ``create_app``, leave
    the existing handlers alone.  Unknown level names fall back to
    ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
