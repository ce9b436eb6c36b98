"""
SQL accessor for the ``account`` table.
"""

import sqlite3
from typing import Optional

from social_media_api.app.repositories.base import storage_cursor
from social_media_api.app.schemas.account import AccountRead


class AccountRepository:
    """Read and insert accounts."""

    @classmethod
    def create(cls, username: str, password: str) -> AccountRead:
        """Insert an account and return it with its generated id."""
        with storage_cursor("create account") as cursor:
            cursor.execute(
                "INSERT INTO account (username, password) VALUES (?, ?)",
                (username, password),
            )
            account_id = cursor.lastrowid
        return AccountRead(account_id=account_id, username=username, password=password)

    @classmethod
    def get_by_username(cls, username: str) -> Optional[AccountRead]:
        with storage_cursor("get account by username") as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE username = ?",
                (username,),
            ).fetchone()
        return cls._row_to_account(row) if row else None

    @classmethod
    def get_by_id(cls, account_id: int) -> Optional[AccountRead]:
        with storage_cursor("get account by id") as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
        return cls._row_to_account(row) if row else None

    @classmethod
    def get_by_credentials(cls, username: str, password: str) -> Optional[AccountRead]:
        """Return the account matching both ``username`` and ``password``."""
        with storage_cursor("get account by credentials") as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account"
                " WHERE username = ? AND password = ?",
                (username, password),
            ).fetchone()
        return cls._row_to_account(row) if row else None

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> AccountRead:
        return AccountRead(
            account_id=row["account_id"],
            username=row["username"],
            password=row["password"],
        )
