"""
Pydantic models for account data.

Registration and login share the same request body.  Both fields are
optional at the schema level so that an incomplete body reaches the
account service and is rejected there with the usual status code
instead of a schema error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """Body of ``POST /register`` and ``POST /login``."""

    username: Optional[str] = Field(None, example="bob")
    password: Optional[str] = Field(None, example="pass1")


class AccountRead(BaseModel):
    """A stored account, including its generated ``account_id``."""

    account_id: int
    username: str
    password: str

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
