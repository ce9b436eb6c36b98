"""
Account endpoints for API v1.

Registration answers 400 and login answers 401 with an empty body when
the account service rejects the request, whatever the reason.
"""

from typing import List, Union

from fastapi import APIRouter, Response, status

from social_media_api.app.api.v1.endpoints import empty_response
from social_media_api.app.schemas.account import AccountCredentials, AccountRead
from social_media_api.app.schemas.message import MessageRead
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("/register", response_model=AccountRead)
async def register(candidate: AccountCredentials) -> Union[AccountRead, Response]:
    """Register a new account and return it with its ``account_id``."""
    outcome = await AccountService.register(candidate)
    if not outcome.is_ok:
        return empty_response(status.HTTP_400_BAD_REQUEST)
    return outcome.value


@router.post("/login", response_model=AccountRead)
async def login(credentials: AccountCredentials) -> Union[AccountRead, Response]:
    """Verify a username/password pair and return the matching account."""
    outcome = await AccountService.login(credentials)
    if not outcome.is_ok:
        return empty_response(status.HTTP_401_UNAUTHORIZED)
    return outcome.value


@router.get("/accounts/{account_id}/messages", response_model=List[MessageRead])
async def list_account_messages(account_id: int) -> List[MessageRead]:
    """List the messages posted by an account.

    The list is empty both when the account has no messages and when
    the account does not exist.
    """
    return await MessageService.list_by_account(account_id)
