"""
Top‑level router for version 1 of the API.

The domain routers declare their full paths themselves
(``/register``, ``/messages/{message_id}``, ...), so they are included
without a prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, tags=["messages"])
