"""
Message endpoints for API v1.

Reading or deleting a message that does not exist is not an error: the
response is 200 with an empty body.  Creating or updating a message
answers 400 with an empty body when the message service rejects it.
"""

from typing import List, Union

from fastapi import APIRouter, Response, status

from social_media_api.app.api.v1.endpoints import empty_response
from social_media_api.app.schemas.message import MessageCreate, MessageRead, MessageUpdate
from social_media_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("/messages", response_model=MessageRead)
async def create_message(candidate: MessageCreate) -> Union[MessageRead, Response]:
    outcome = await MessageService.create(candidate)
    if not outcome.is_ok:
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return outcome.value


@router.get("/messages", response_model=List[MessageRead])
async def list_messages() -> List[MessageRead]:
    """Return every message, oldest first."""
    return await MessageService.list_all()


@router.get("/messages/{message_id}", response_model=MessageRead)
async def get_message(message_id: int) -> Union[MessageRead, Response]:
    outcome = await MessageService.get_by_id(message_id)
    if not outcome.is_ok:
        return empty_response(status.HTTP_200_OK)
    return outcome.value


@router.delete("/messages/{message_id}", response_model=MessageRead)
async def delete_message(message_id: int) -> Union[MessageRead, Response]:
    """Delete a message and return it as it was before deletion."""
    outcome = await MessageService.delete_by_id(message_id)
    if not outcome.is_ok:
        return empty_response(status.HTTP_200_OK)
    return outcome.value


@router.patch("/messages/{message_id}", response_model=MessageRead)
async def update_message(message_id: int, patch: MessageUpdate) -> Union[MessageRead, Response]:
    """Replace the text of a message and return the full updated message."""
    outcome = await MessageService.update(message_id, patch)
    if not outcome.is_ok:
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return outcome.value
