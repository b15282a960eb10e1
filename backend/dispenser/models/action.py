"""
Solana Actions request and response models.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class ActionRule(BaseModel):
    """Maps website paths to action API paths in actions.json"""
    path_pattern: str = Field(..., alias="pathPattern")
    api_path: str = Field(..., alias="apiPath")


class ActionsJson(BaseModel):
    rules: List[ActionRule]


class LinkedAction(BaseModel):
    label: str
    href: str


class ActionLinks(BaseModel):
    actions: List[LinkedAction] = []


class ActionGetResponse(BaseModel):
    """Metadata shown by wallets and unfurlers before the action runs"""
    title: str
    icon: str
    description: str
    links: ActionLinks


class ActionPostRequest(BaseModel):
    account: Optional[str] = Field(None, description="Public key of the wallet requesting the transaction")


class ActionPostResponse(BaseModel):
    """Partially signed transaction handed to the wallet"""
    transaction: str = Field(..., description="Base64 encoded serialized transaction")
    message: Optional[str] = None


class ActionGetError(BaseModel):
    message: str


class ActionPostError(BaseModel):
    error: str
