"""
Solana Actions router - discovery document, action metadata and claim
transaction endpoints for the NFT dispenser.
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from fastapi.responses import JSONResponse

from ..config import ACTION_PATH
from ..models.action import (
    ActionGetError,
    ActionGetResponse,
    ActionPostError,
    ActionPostRequest,
    ActionPostResponse,
    ActionRule,
    ActionsJson,
)
from ..dependencies.solana import get_dispenser_handler
from ..utils.handlers import MintDispenserHandler
from ..utils.logging_config import setup_logging
from ..utils.metrics import action_failures, action_requests
from ..utils.solana_error import DispenserError

# Configure logging
logger = setup_logging(__name__)

# Create FastAPI router
router = APIRouter(
    tags=["Actions"],
    responses={404: {"description": "Not found"}},
)

ACTIONS_JSON_RULES = [
    ActionRule(pathPattern="/*", apiPath="/api/actions/*"),
    ActionRule(pathPattern="/api/actions/**", apiPath="/api/actions/**"),
]


@router.get("/actions.json", response_model=ActionsJson)
async def get_actions_json() -> ActionsJson:
    """
    Discovery document mapping website paths to action API paths.
    """
    return ActionsJson(rules=ACTIONS_JSON_RULES)


@router.get(
    ACTION_PATH,
    response_model=ActionGetResponse,
    responses={500: {"model": ActionGetError}},
)
async def get_mint_action(
    to: Optional[str] = Query(None, description="Recipient wallet address (base58)"),
    handler: MintDispenserHandler = Depends(get_dispenser_handler),
):
    """
    Describe the mint action for wallets and preview UIs.

    - **to**: Optional recipient, the default recipient is used when absent

    Invalid recipients are reported as HTTP 500 with a ``message`` body.
    """
    action_requests.labels(method="GET").inc()
    try:
        return handler.describe(to)
    except DispenserError as e:
        logger.warning(f"Action metadata request failed ({e.kind}): {e.message}")
        action_failures.labels(method="GET", reason=e.kind).inc()
        return JSONResponse(status_code=500, content={"message": e.message})
    except Exception as e:
        logger.error(f"Unexpected error describing action: {str(e)}")
        logger.exception(e)
        action_failures.labels(method="GET", reason=type(e).__name__).inc()
        return JSONResponse(status_code=500, content={"message": str(e) or "An unknown error occurred"})


@router.post(
    ACTION_PATH,
    response_model=ActionPostResponse,
    responses={400: {"model": ActionPostError}},
)
async def post_mint_action(
    to: Optional[str] = Query(None, description="Recipient wallet address (base58)"),
    payload: Optional[ActionPostRequest] = Body(None),
    handler: MintDispenserHandler = Depends(get_dispenser_handler),
):
    """
    Build a claim transaction minting one NFT to the recipient.

    - **to**: Optional recipient, the default recipient is used when absent
    - **account** (body): Wallet requesting the transaction, required

    Returns the base64 transaction already signed by the fee payer and mint.
    The recipient wallet has to add its signature before submitting. Any
    failure is reported as HTTP 400 with an ``error`` body.
    """
    action_requests.labels(method="POST").inc()
    account = payload.account if payload is not None else None
    try:
        return await handler.create_claim(to, account)
    except DispenserError as e:
        logger.warning(f"Claim request failed ({e.kind}): {e.message}")
        action_failures.labels(method="POST", reason=e.kind).inc()
        return JSONResponse(status_code=400, content={"error": e.message})
    except Exception as e:
        logger.error(f"Unexpected error building claim transaction: {str(e)}")
        logger.exception(e)
        action_failures.labels(method="POST", reason=type(e).__name__).inc()
        return JSONResponse(status_code=400, content={"error": str(e) or "An unknown error occurred"})


@router.options("/actions.json", include_in_schema=False)
@router.options(ACTION_PATH, include_in_schema=False)
async def options_action() -> Response:
    return Response(status_code=200)
