"""
Middleware adding the Solana Actions protocol headers.
"""
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

ACTIONS_ALLOWED_HEADERS = [
    "Content-Type",
    "Authorization",
    "Content-Encoding",
    "Accept-Encoding",
    "X-Action-Version",
    "X-Blockchain-Ids",
]

ACTIONS_EXPOSED_HEADERS = [
    "X-Action-Version",
    "X-Blockchain-Ids",
]


class ActionHeadersMiddleware(BaseHTTPMiddleware):
    """
    Stamps every response with the action version and blockchain ids.
    """
    def __init__(self, app: ASGIApp, action_version: str, blockchain_id: str):
        super().__init__(app)
        self.action_version = action_version
        self.blockchain_id = blockchain_id

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Action-Version"] = self.action_version
        response.headers["X-Blockchain-Ids"] = self.blockchain_id
        return response
