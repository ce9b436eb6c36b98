"""
Business rules for accounts.

Registration succeeds only if the username is not empty, the password
has at least ``MIN_PASSWORD_LENGTH`` characters and no account with
that username exists yet.  Login succeeds only if both the username and
the password match a stored account exactly.

Uniqueness is a check‑then‑insert sequence without a database
constraint, so two concurrent registrations of the same username can
both succeed.
"""

import logging

from social_media_api.app.core.errors import StorageError
from social_media_api.app.core.outcome import Outcome
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.schemas.account import AccountCredentials, AccountRead

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Registration and login."""

    @classmethod
    async def register(cls, candidate: AccountCredentials) -> Outcome[AccountRead]:
        """Create a new account.

        Returns ``Outcome.ok`` with the stored account, ``Outcome.invalid``
        if a rule is violated, or ``Outcome.failed`` if the database
        could not be reached.
        """
        username = candidate.username or ""
        password = candidate.password or ""
        if not username:
            return cls._reject("username is empty")
        if len(password) < MIN_PASSWORD_LENGTH:
            return cls._reject(f"password shorter than {MIN_PASSWORD_LENGTH} characters")
        try:
            if AccountRepository.get_by_username(username) is not None:
                return cls._reject(f"username {username!r} already taken")
            account = AccountRepository.create(username, password)
        except StorageError as exc:
            logger.warning("Registration of %r aborted: %s", username, exc)
            return Outcome.failed(str(exc))
        logger.info("Registered account %s (%s)", account.account_id, username)
        return Outcome.ok(account)

    @classmethod
    async def login(cls, credentials: AccountCredentials) -> Outcome[AccountRead]:
        """Authenticate by exact username and password match."""
        username = credentials.username or ""
        password = credentials.password or ""
        try:
            account = AccountRepository.get_by_credentials(username, password)
        except StorageError as exc:
            logger.warning("Login of %r aborted: %s", username, exc)
            return Outcome.failed(str(exc))
        if account is None:
            logger.info("Failed login for %r", username)
            return Outcome.unauthorized("credentials do not match any account")
        logger.debug("Account %s logged in", account.account_id)
        return Outcome.ok(account)

    @staticmethod
    def _reject(reason: str) -> Outcome[AccountRead]:
        logger.info("Registration rejected: %s", reason)
        return Outcome.invalid(reason)
