"""
SQL accessor for the ``message`` table.

Listing queries order rows by ``message_id`` so clients see messages
in the order they were posted.
"""

import sqlite3
from typing import List, Optional

from social_media_api.app.repositories.base import storage_cursor
from social_media_api.app.schemas.message import MessageRead


class MessageRepository:
    """CRUD operations on messages."""

    @classmethod
    def create(cls, posted_by: int, message_text: str, time_posted_epoch: int) -> MessageRead:
        """Insert a message and return it with its generated id."""
        with storage_cursor("create message") as cursor:
            cursor.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (posted_by, message_text, time_posted_epoch),
            )
            message_id = cursor.lastrowid
        return MessageRead(
            message_id=message_id,
            posted_by=posted_by,
            message_text=message_text,
            time_posted_epoch=time_posted_epoch,
        )

    @classmethod
    def list_all(cls) -> List[MessageRead]:
        with storage_cursor("list messages") as cursor:
            rows = cursor.execute(
                "SELECT message_id, posted_by, message_text, time_posted_epoch"
                " FROM message ORDER BY message_id"
            ).fetchall()
        return [cls._row_to_message(row) for row in rows]

    @classmethod
    def get_by_id(cls, message_id: int) -> Optional[MessageRead]:
        with storage_cursor("get message") as cursor:
            row = cursor.execute(
                "SELECT message_id, posted_by, message_text, time_posted_epoch"
                " FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        return cls._row_to_message(row) if row else None

    @classmethod
    def delete(cls, message_id: int) -> bool:
        """Delete a message.  Returns ``True`` if a row was removed."""
        with storage_cursor("delete message") as cursor:
            cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
            affected = cursor.rowcount
        return affected > 0

    @classmethod
    def update_text(cls, message_id: int, message_text: str) -> bool:
        """Overwrite the text of a message.  Returns ``True`` if a row changed."""
        with storage_cursor("update message") as cursor:
            cursor.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (message_text, message_id),
            )
            affected = cursor.rowcount
        return affected > 0

    @classmethod
    def list_by_account(cls, account_id: int) -> List[MessageRead]:
        with storage_cursor("list account messages") as cursor:
            rows = cursor.execute(
                "SELECT message_id, posted_by, message_text, time_posted_epoch"
                " FROM message WHERE posted_by = ? ORDER BY message_id",
                (account_id,),
            ).fetchall()
        return [cls._row_to_message(row) for row in rows]

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> MessageRead:
        return MessageRead(
            message_id=row["message_id"],
            posted_by=row["posted_by"],
            message_text=row["message_text"],
            time_posted_epoch=row["time_posted_epoch"],
        )
