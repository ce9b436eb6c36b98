"""Connection handling shared by the repositories."""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from social_media_api.app.core.db import get_connection
from social_media_api.app.core.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_cursor(operation: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor for ``operation`` and commit when the block exits.

    Any ``sqlite3.Error`` raised while connecting or inside the block is
    logged with its traceback and converted into ``StorageError``.  So is
    the ``OverflowError`` sqlite3 raises for integers outside the signed
    64-bit range.  The transaction is not committed in that case.
    """
    conn: Optional[sqlite3.Connection] = None
    try:
        conn = get_connection()
        yield conn.cursor()
        conn.commit()
    except (sqlite3.Error, OverflowError) as exc:
        logger.exception("Storage failure during %s", operation)
        raise StorageError(f"{operation} failed: {exc}") from exc
    finally:
        if conn is not None:
            conn.close()
