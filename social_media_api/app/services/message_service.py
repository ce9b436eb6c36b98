"""
Business rules for messages.

A message can be created only if its text is not empty, is at most
``MAX_MESSAGE_LENGTH`` characters long and ``posted_by`` refers to an
existing account.  Updates follow the same text rules and require the
message to exist; only ``message_text`` is ever changed.

Storage failures are logged and turned into the negative outcome of
the operation at hand; list operations return an empty list instead.
"""

import logging
from typing import List, Optional

from social_media_api.app.core.errors import StorageError
from social_media_api.app.core.outcome import Outcome
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.app.schemas.message import (
    MAX_MESSAGE_LENGTH,
    MessageCreate,
    MessageRead,
    MessageUpdate,
)

logger = logging.getLogger(__name__)


def _text_problem(text: Optional[str]) -> Optional[str]:
    """Return why ``text`` is not acceptable, or ``None`` if it is."""
    if not text:
        return "message text is empty"
    if len(text) > MAX_MESSAGE_LENGTH:
        return f"message text longer than {MAX_MESSAGE_LENGTH} characters"
    return None


class MessageService:
    """Create, read, update and delete messages."""

    @classmethod
    async def create(cls, candidate: MessageCreate) -> Outcome[MessageRead]:
        problem = _text_problem(candidate.message_text)
        if problem:
            logger.info("Message rejected: %s", problem)
            return Outcome.invalid(problem)
        try:
            if AccountRepository.get_by_id(candidate.posted_by) is None:
                logger.info("Message rejected: account %s does not exist", candidate.posted_by)
                return Outcome.invalid(f"account {candidate.posted_by} does not exist")
            message = MessageRepository.create(
                candidate.posted_by,
                candidate.message_text,
                candidate.time_posted_epoch,
            )
        except StorageError as exc:
            logger.warning("Message creation aborted: %s", exc)
            return Outcome.failed(str(exc))
        logger.info("Created message %s by account %s", message.message_id, message.posted_by)
        return Outcome.ok(message)

    @classmethod
    async def list_all(cls) -> List[MessageRead]:
        try:
            return MessageRepository.list_all()
        except StorageError as exc:
            logger.warning("Listing messages failed, returning none: %s", exc)
            return []

    @classmethod
    async def get_by_id(cls, message_id: int) -> Outcome[MessageRead]:
        try:
            message = MessageRepository.get_by_id(message_id)
        except StorageError as exc:
            logger.warning("Reading message %s failed: %s", message_id, exc)
            return Outcome.failed(str(exc))
        if message is None:
            return Outcome.absent(f"message {message_id} does not exist")
        return Outcome.ok(message)

    @classmethod
    async def delete_by_id(cls, message_id: int) -> Outcome[MessageRead]:
        """Delete a message and return the snapshot taken before deletion.

        Deleting a message that does not exist yields ``Outcome.absent``.
        """
        try:
            message = MessageRepository.get_by_id(message_id)
            if message is None:
                return Outcome.absent(f"message {message_id} does not exist")
            if not MessageRepository.delete(message_id):
                # Removed by a concurrent request between the read and the delete.
                return Outcome.absent(f"message {message_id} already deleted")
        except StorageError as exc:
            logger.warning("Deleting message %s failed: %s", message_id, exc)
            return Outcome.failed(str(exc))
        logger.info("Deleted message %s", message_id)
        return Outcome.ok(message)

    @classmethod
    async def update(cls, message_id: int, patch: MessageUpdate) -> Outcome[MessageRead]:
        """Replace the text of a message and return the re‑read record."""
        try:
            if MessageRepository.get_by_id(message_id) is None:
                logger.info("Update rejected: message %s does not exist", message_id)
                return Outcome.invalid(f"message {message_id} does not exist")
            problem = _text_problem(patch.message_text)
            if problem:
                logger.info("Update of message %s rejected: %s", message_id, problem)
                return Outcome.invalid(problem)
            if not MessageRepository.update_text(message_id, patch.message_text):
                return Outcome.invalid(f"message {message_id} was not updated")
            message = MessageRepository.get_by_id(message_id)
        except StorageError as exc:
            logger.warning("Updating message %s failed: %s", message_id, exc)
            return Outcome.failed(str(exc))
        if message is None:
            return Outcome.invalid(f"message {message_id} deleted during update")
        logger.info("Updated message %s", message_id)
        return Outcome.ok(message)

    @classmethod
    async def list_by_account(cls, account_id: int) -> List[MessageRead]:
        """Messages posted by ``account_id``; empty for unknown accounts too."""
        try:
            return MessageRepository.list_by_account(account_id)
        except StorageError as exc:
            logger.warning("Listing messages of account %s failed: %s", account_id, exc)
            return []
