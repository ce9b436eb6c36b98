"""
Pydantic schemas for messages.

A message is a short text (at most ``MAX_MESSAGE_LENGTH`` characters)
posted by an account at a caller supplied UNIX timestamp.  Only the
text may change after creation.
"""

from typing import Optional

from pydantic import BaseModel, Field

MAX_MESSAGE_LENGTH = 255


class MessageCreate(BaseModel):
    """Schema for submitting a new message.

    Missing numeric fields default to ``0``, which never matches a
    generated account id, so such messages are rejected by the service.
    """

    posted_by: int = Field(0, description="ID of the posting account", example=1)
    message_text: Optional[str] = Field(None, description="Text of the message", example="hi")
    time_posted_epoch: int = Field(0, description="UNIX timestamp of the post", example=1000)


class MessageUpdate(BaseModel):
    """Schema for ``PATCH /messages/{message_id}``.

    Any other field in the body is ignored.
    """

    message_text: Optional[str] = None


class MessageRead(BaseModel):
    """A stored message."""

    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
